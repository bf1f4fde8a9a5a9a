from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from dwolla_hal.core.hal import Resource

from .common import WIRE_CONFIG


class KBAAnswer(BaseModel):
    id: str
    text: str = ""

    model_config = WIRE_CONFIG


class KBAQuestion(BaseModel):
    id: str
    text: str = ""
    answers: List[KBAAnswer] = Field(default_factory=list)

    model_config = WIRE_CONFIG


class KBAQuestionAnswer(BaseModel):
    question_id: str = Field(alias="questionId")
    answer_id: str = Field(alias="answerId")

    model_config = WIRE_CONFIG


class KBARequest(BaseModel):
    answers: List[KBAQuestionAnswer] = Field(default_factory=list)

    model_config = WIRE_CONFIG


class KBA(Resource):
    """A knowledge-based authentication session for a personal customer."""

    id: str
    questions: List[KBAQuestion] = Field(default_factory=list)

    async def verify(self, body: KBARequest) -> None:
        link = self.require_link("self")
        await self.client.post(link.href, body)


__all__ = [
    "KBAAnswer",
    "KBAQuestion",
    "KBAQuestionAnswer",
    "KBARequest",
    "KBA",
]
