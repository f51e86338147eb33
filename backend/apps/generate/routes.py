"""Generation routes - blog and code writing modes."""

from fastapi import APIRouter

from apps.generate.handlers import generate_blog, generate_code

router = APIRouter(prefix="/generate", tags=["Generate"])

# POST /generate/blog - Blog post
router.post("/blog")(generate_blog)

# POST /generate/code - Code snippet
router.post("/code")(generate_code)
