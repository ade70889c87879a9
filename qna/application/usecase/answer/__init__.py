"""Answer use cases."""

from .accept_answer import AcceptAnswerRequest, AcceptAnswerResponse, AcceptAnswerUseCase
from .create_answer import CreateAnswerRequest, CreateAnswerResponse, CreateAnswerUseCase
from .delete_answer import DeleteAnswerRequest, DeleteAnswerResponse, DeleteAnswerUseCase
from .pin_answer import PinAnswerRequest, PinAnswerResponse, PinAnswerUseCase

__all__ = [
    "AcceptAnswerRequest",
    "AcceptAnswerResponse",
    "AcceptAnswerUseCase",
    "CreateAnswerRequest",
    "CreateAnswerResponse",
    "CreateAnswerUseCase",
    "DeleteAnswerRequest",
    "DeleteAnswerResponse",
    "DeleteAnswerUseCase",
    "PinAnswerRequest",
    "PinAnswerResponse",
    "PinAnswerUseCase",
]
