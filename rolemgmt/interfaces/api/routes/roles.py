"""Rutas para administrar roles y sus asignaciones."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from rolemgmt.application.use_cases.roles import (
    create_role as create_role_uc,
    delete_role as delete_role_uc,
    get_role as get_role_uc,
    list_role_users as list_role_users_uc,
)
from rolemgmt.domain.entities import Role
from rolemgmt.infrastructure.database import get_db
from rolemgmt.interfaces.api.schemas import RoleCreate, RoleRead, RoleUserRead

router = APIRouter(prefix="/roles", tags=["roles"])
logger = logging.getLogger(__name__)

EMPTY_BODY_MESSAGE = "Por favor proporcione datos del rol en el cuerpo de la solicitud"


def _to_read_model(role: Role) -> RoleRead:
    return RoleRead.model_validate(role)


@router.post(
    "",
    response_model=RoleRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Cuerpo de la solicitud vacío"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Error al crear el rol"},
    },
)
async def create_role(request: Request, db: Session = Depends(get_db)):
    """Crea un nuevo rol a partir del JSON recibido en el cuerpo."""

    logger.info("Solicitud recibida para crear un nuevo rol")

    body = await request.body()
    if not body:
        return PlainTextResponse(EMPTY_BODY_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST)

    try:
        role_in = RoleCreate.model_validate_json(body)
        role = await run_in_threadpool(
            create_role_uc,
            db,
            role_name=role_in.role_name,
            description=role_in.description,
        )
    except Exception as exc:
        logger.exception("Error al crear rol")
        return PlainTextResponse(
            f"Error al crear rol: {exc}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return _to_read_model(role)


@router.get("/{role_id}", response_model=RoleRead)
def read_role(role_id: int, db: Session = Depends(get_db)):
    """Obtiene el rol identificado por ``role_id``."""

    try:
        role = get_role_uc(db, role_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _to_read_model(role)


@router.get("/{role_id}/users", response_model=list[RoleUserRead])
def list_role_users(role_id: int, db: Session = Depends(get_db)):
    """Devuelve los usuarios asignados al rol."""

    users = list_role_users_uc(db, role_id)
    return [RoleUserRead.model_validate(user) for user in users]


@router.delete("/{role_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_role(role_id: int, db: Session = Depends(get_db)):
    """Elimina el rol indicado junto con sus asignaciones a usuarios."""

    if not delete_role_uc(db, role_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Rol no encontrado")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
