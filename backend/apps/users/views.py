from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema, OpenApiResponse

from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger
from .container import build_user_service
from .serializers import AddressUpdateSerializer, UserProfileSerializer

logger = get_logger(__name__).bind(component="users", layer="view")


@extend_schema(tags=["Users"])
class MeView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_user_service()
    log = logger.bind(view="MeView")

    @extend_schema(
        summary="Get current user",
        responses={
            200: UserProfileSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request):
        self.log.debug("Returning current user profile", user_id=request.user.id)
        dto = self.service.get_profile(request.user.id)
        return Response(UserProfileSerializer(dto).data)


@extend_schema(tags=["Users"])
class MeAddressView(APIView):
    permission_classes = [IsAuthenticated]
    service = build_user_service()
    log = logger.bind(view="MeAddressView")

    @extend_schema(
        summary="Set shipping address",
        description="Replaces the current user's shipping address. Checkout requires a non-default address.",
        request=AddressUpdateSerializer,
        responses={
            200: UserProfileSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer),
            401: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def put(self, request):
        serializer = AddressUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.log.info("Updating shipping address via API", user_id=request.user.id)
        dto = self.service.set_address(
            request.user.id, serializer.validated_data["address"]
        )
        return Response(UserProfileSerializer(dto).data)
