"""Product RPC view.

Exposes the ``ProductService`` through a single message-pattern endpoint.
The request body is ``{"cmd": <name>, "payload": {...}}``; the response
is always a tagged ``RpcResult`` envelope whose ``error.status`` doubles
as the HTTP status code.
"""

from __future__ import annotations

from http import HTTPStatus

from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.core.rpc import RpcResult
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.rpc import dispatcher
from modules.products.services import ProductService


class ProductRpcView(APIView):
    """POST /rpc/products

    Opens a store handle for the duration of the request and closes it
    afterwards.  Errors outside the product taxonomy (e.g. database
    errors) are not caught here and surface as a 500.
    """

    def post(self, request: Request) -> Response:
        body = request.data
        if not isinstance(body, dict) or not isinstance(body.get("cmd"), str):
            result = RpcResult.failure(
                HTTPStatus.BAD_REQUEST, "Request body must include a 'cmd' string"
            )
            return Response(result.to_wire(), status=result.http_status)

        with ProductDjangoRepository() as repository:
            service = ProductService(repository=repository)
            result = dispatcher.dispatch(service, body["cmd"], body.get("payload"))

        return Response(result.to_wire(), status=result.http_status)
