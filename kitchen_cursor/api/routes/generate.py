"""
FastAPI Routes: post generation.
"""

from fastapi import APIRouter, Depends

from kitchen_cursor.api.dependencies import get_current_admin, get_orchestrator
from kitchen_cursor.api.schemas.generation_schemas import GeneratePostRequest, GenerationResponse
from kitchen_cursor.application.commands.post_commands import GeneratePostCommand
from kitchen_cursor.application.generation.orchestrator import GenerationOrchestrator

router = APIRouter(
    prefix="/admin",
    tags=["generation"],
    dependencies=[Depends(get_current_admin)],
)


@router.post("/generate-post", response_model=GenerationResponse, status_code=201)
async def generate_post(
    request: GeneratePostRequest,
    orchestrator: GenerationOrchestrator = Depends(get_orchestrator)
):
    """
    Generate a post with product reviews for a topic.

    Takes one to two minutes with a cloud model. The post is stored with
    status REVIEW.
    """
    command = GeneratePostCommand(topic=request.topic)
    report = await orchestrator.generate(command.topic)
    return GenerationResponse.from_report(report)
