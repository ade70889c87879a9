"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from qna.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container.

    Persistence resolves to PostgreSQL; tests swap in the in-memory
    repositories through ``tests.di.build_test_container``.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    # FastapiProvider exposes the current Request in REQUEST scope
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app.

    dishka opens a REQUEST scope per HTTP request and closes it (committing
    or rolling back the session) when the response is sent.
    """
    setup_dishka(container, app)
