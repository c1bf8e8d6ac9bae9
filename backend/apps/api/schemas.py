from drf_spectacular.utils import OpenApiExample
from rest_framework import serializers


class ErrorDetailSerializer(serializers.Serializer):
    code = serializers.CharField(help_text="Machine readable code, e.g. NOT_FOUND or BAD_REQUEST.")
    message = serializers.CharField()
    status = serializers.IntegerField()
    details = serializers.JSONField(required=False)
    hint = serializers.CharField(required=False, allow_blank=True)


class ErrorResponseSerializer(serializers.Serializer):
    error = ErrorDetailSerializer()


def error_example(name: str, code: str, message: str, status: int) -> OpenApiExample:
    """Documented error envelope for one failure of an endpoint."""
    return OpenApiExample(
        name,
        value={"error": {"code": code, "message": message, "status": status}},
        response_only=True,
        status_codes=[str(status)],
    )
