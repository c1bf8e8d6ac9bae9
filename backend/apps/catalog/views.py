from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema

from apps.api.schemas import ErrorResponseSerializer
from apps.common import get_logger
from .container import build_product_service
from .serializers import ProductReadSerializer

logger = get_logger(__name__).bind(component="catalog", layer="view")


@extend_schema(tags=["Products"])
class ProductListView(APIView):
    permission_classes = [AllowAny]
    service = build_product_service()
    log = logger.bind(view="ProductListView")

    @extend_schema(
        summary="List products",
        parameters=[
            OpenApiParameter(
                name="category",
                description="Only return products in this category",
                required=False,
                type=str,
            )
        ],
        responses={200: ProductReadSerializer(many=True)},
    )
    def get(self, request):
        category = request.query_params.get("category") or None
        data = self.service.list_products(category=category)
        self.log.debug("Listing products via API", category=category, count=len(data))
        return Response(ProductReadSerializer(data, many=True).data)


@extend_schema(tags=["Products"])
class ProductDetailView(APIView):
    permission_classes = [AllowAny]
    service = build_product_service()
    log = logger.bind(view="ProductDetailView")

    @extend_schema(
        summary="Get product",
        parameters=[OpenApiParameter("product_id", int, OpenApiParameter.PATH)],
        responses={
            200: ProductReadSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, product_id: int):
        self.log.debug("Fetching product detail", product_id=product_id)
        dto = self.service.get_product(product_id)
        return Response(ProductReadSerializer(dto).data)
