"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from webinars.domain.errors import DomainError, ErrorCode
from webinars.handlers import dependencies
from webinars.handlers.serializers import (
    ChangeSeatsSerializer,
    OrganizeWebinarSerializer,
    SeatsUpdatedSerializer,
    WebinarCreatedSerializer,
)
from webinars.services import ChangeSeatsCommand, OrganizeWebinarCommand

ERROR_STATUS = {
    ErrorCode.WEBINAR_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.WEBINAR_NOT_ORGANIZER: status.HTTP_401_UNAUTHORIZED,
}

INVALID_REQUEST = "INVALID_REQUEST"


def domain_error_response(error: DomainError) -> Response:
    return Response(
        {"error": {"code": error.code.value, "message": error.message}},
        status=ERROR_STATUS.get(error.code, status.HTTP_400_BAD_REQUEST),
    )


def invalid_request_response(details: dict) -> Response:
    return Response(
        {
            "error": {
                "code": INVALID_REQUEST,
                "message": "Invalid request body",
                "details": details,
            }
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


class OrganizeWebinarView(APIView):
    """Handler for POST /webinars"""

    def post(self, request: Request) -> Response:
        serializer = OrganizeWebinarSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_request_response(serializer.errors)
        data = serializer.validated_data

        command = OrganizeWebinarCommand(
            organizer_id=request.user.id.value,
            title=data["title"],
            seats=data["seats"],
            start_date=data["startDate"],
            end_date=data["endDate"],
        )
        try:
            result = dependencies.get_organize_webinar().execute(command)
        except DomainError as exc:
            return domain_error_response(exc)

        body = WebinarCreatedSerializer({"id": result.id}).data
        return Response(body, status=status.HTTP_201_CREATED)


class ChangeSeatsView(APIView):
    """Handler for POST /webinars/{webinar_id}/seats

    A seat value that is not a whole number is rejected with 400
    INVALID_SEATS before the webinar is looked up, so it wins over 404.
    """

    def post(self, request: Request, webinar_id: str) -> Response:
        serializer = ChangeSeatsSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_request_response(serializer.errors)

        command = ChangeSeatsCommand(
            user=request.user,
            webinar_id=webinar_id,
            seats=serializer.validated_data["seats"],
        )
        try:
            result = dependencies.get_change_seats().execute(command)
        except DomainError as exc:
            return domain_error_response(exc)

        body = SeatsUpdatedSerializer({"message": result.message}).data
        return Response(body, status=status.HTTP_200_OK)
