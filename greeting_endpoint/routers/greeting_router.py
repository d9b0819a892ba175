"""Greeting FastAPI router"""
from http import HTTPStatus
import logging

from fastapi import APIRouter

from greeting_endpoint import CONFIG
from greeting_endpoint.domain.greeting import Greeting
from greeting_endpoint.services.greeting_resource import GreetingResource

_LOGGER = logging.getLogger(__name__)


def create_router(resource: GreetingResource, path: str | None = None) -> APIRouter:
    """
    Expose ``resource`` over HTTP.

    :param resource: the greeting resource serving both routes
    :param path: route path, defaults to the configured resource path
    """
    router = APIRouter(tags=['greetings'])
    path = path or CONFIG.main.resource_path

    @router.get(path, status_code=HTTPStatus.OK, response_model=list[Greeting])
    def list_greetings() -> list[Greeting]:
        return resource.list()

    @router.post(path, status_code=HTTPStatus.OK, response_model=Greeting)
    def hello(greeting: Greeting) -> Greeting:
        _LOGGER.debug('Greeting %s', greeting.name)
        return resource.hello(greeting)

    return router
