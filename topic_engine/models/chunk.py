"""
Chunk payload model.

Represents a content chunk as it crosses the clustering task boundary.

Dependencies: pydantic
System role: Chunk data structure for clustering requests
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ChunkPayload(BaseModel):
    """
    Chunk sent to the clustering worker.

    Extra keys (content, metadata, material_id, ...) pass through untouched.
    The embedding is deliberately untyped: malformed embeddings are dropped
    by the engine per chunk instead of failing the whole request.
    """

    model_config = ConfigDict(extra="allow")

    id: str | int = Field(description="Chunk identifier")
    embedding: Any = Field(
        default=None,
        description="Embedding vector, or its JSON string encoding",
    )
