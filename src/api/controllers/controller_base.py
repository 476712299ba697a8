"""Base class for the API controllers.

Controllers receive their handlers explicitly and turn the ``OperationResult``
of each handler into an HTTP response, the same way neuroglia's
``ControllerBase.process`` does for mediator-driven controllers.
"""

from http import HTTPStatus
from typing import Any, Optional

from classy_fastapi.routable import Routable
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response
from neuroglia.core import OperationResult
from pydantic import BaseModel

PROBLEM_JSON = "application/problem+json"


def problem_response(status: int, title: str, detail: Optional[str]) -> JSONResponse:
    """Render an RFC 7807 problem details document."""
    return JSONResponse(
        status_code=status,
        content={"type": "about:blank", "title": title, "status": status, "detail": detail},
        media_type=PROBLEM_JSON,
    )


class ApiControllerBase(Routable):
    """Routable controller with an explicit ``process`` for handler results."""

    name: str

    def __init__(self, prefix: str, tags: list[str]):
        Routable.__init__(self, prefix=prefix, tags=tags)

    def process(self, result: OperationResult, response_model: Optional[type[BaseModel]] = None, headers: Optional[dict[str, str]] = None) -> Response:
        """Map a handler result to a response.

        Successful data is validated into ``response_model`` (element-wise for
        lists) and serialized by alias; failures become problem details.
        """
        status = result.status
        if not result.is_success:
            title = "Validation Error" if status == HTTPStatus.BAD_REQUEST else HTTPStatus(status).phrase
            return problem_response(status, title, result.detail)

        if status == HTTPStatus.NO_CONTENT or result.data is None:
            return Response(status_code=status, headers=headers)

        return JSONResponse(status_code=status, content=self._serialize(result.data, response_model), headers=headers)

    @staticmethod
    def _serialize(data: Any, response_model: Optional[type[BaseModel]]) -> Any:
        if response_model is None:
            return jsonable_encoder(data)
        if isinstance(data, list):
            return [response_model.model_validate(item).model_dump(mode="json", by_alias=True) for item in data]
        return response_model.model_validate(data).model_dump(mode="json", by_alias=True)
