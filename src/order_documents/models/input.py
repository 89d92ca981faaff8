"""
Input models for request validation using Pydantic.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class OrderLookupRequest(BaseModel):
    """Request body accepted by both the confirmation and the export endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    order_id: Annotated[str, Field(
        alias='pedido_id',
        min_length=1,
        description='Identifier of the order to look up',
        examples=['abcd1234-5678-90ef-1234-567890abcdef']
    )]
