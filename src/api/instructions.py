"""Instruction API endpoints. Reads are public; writes require an admin session."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from src.api.dependencies import AdminUser, get_instruction_service, verify_api_key
from src.schemas.common import Envelope, success
from src.schemas.instruction import InstructionCreate, InstructionResponse, InstructionUpdate
from src.services.instruction_service import InstructionService

router = APIRouter(
    prefix="/api/v1/instructions", tags=["instructions"], dependencies=[Depends(verify_api_key)]
)

InstructionServiceDep = Annotated[InstructionService, Depends(get_instruction_service)]


@router.get("", response_model=Envelope[list[InstructionResponse]])
def get_instructions(service: InstructionServiceDep):
    return success("Get all instructions successfully", service.get_all())


@router.get("/recipe", response_model=Envelope[list[InstructionResponse]])
def get_instructions_by_recipe(
    recipe_id: Annotated[int, Query(alias="recipeId")],
    service: InstructionServiceDep,
):
    """Get the steps of a recipe in order."""
    instructions = service.get_all_by_recipe_id(recipe_id)
    return success("Get recipe instructions successfully", instructions)


@router.get("/{instruction_id}", response_model=Envelope[InstructionResponse])
def get_instruction(instruction_id: int, service: InstructionServiceDep):
    return success("Get instruction successfully", service.get_one(instruction_id))


@router.post(
    "", response_model=Envelope[InstructionResponse], status_code=status.HTTP_201_CREATED
)
def create_instruction(
    instruction_data: InstructionCreate,
    current_user: AdminUser,
    service: InstructionServiceDep,
):
    """Add a step to a recipe (admin only)."""
    instruction = service.create(instruction_data)
    return success("Create instruction successfully", instruction, status.HTTP_201_CREATED)


@router.patch("/{instruction_id}", response_model=Envelope[InstructionResponse])
def update_instruction(
    instruction_id: int,
    instruction_data: InstructionUpdate,
    current_user: AdminUser,
    service: InstructionServiceDep,
):
    """Update a step (admin only)."""
    instruction = service.update(instruction_id, instruction_data)
    return success("Update instruction successfully", instruction)


@router.delete("/{instruction_id}", response_model=Envelope[dict])
def delete_instruction(
    instruction_id: int, current_user: AdminUser, service: InstructionServiceDep
):
    """Delete a step (admin only)."""
    service.delete(instruction_id)
    return success("Delete instruction successfully", {"status": "success"})
