"""
Output models for API responses using Pydantic.

Field names are the public wire contract of the endpoints and are therefore
kept in Portuguese.
"""

from typing import Annotated

from pydantic import BaseModel, Field


class ConfirmationOutput(BaseModel):
    """Response model for a processed order confirmation."""

    sucesso: Annotated[bool, Field(
        default=True,
        description='Whether the confirmation was processed'
    )] = True

    mensagem: Annotated[str, Field(
        description='Human readable outcome',
        examples=['Confirmação processada']
    )]

    pedido: Annotated[str, Field(
        description='Full order identifier'
    )]

    cliente: Annotated[str, Field(
        description='Email address the confirmation is addressed to'
    )]


class ErrorOutput(BaseModel):
    """Response model for every error status."""

    erro: Annotated[str, Field(
        description='Error message',
        examples=['Pedido não encontrado']
    )]
