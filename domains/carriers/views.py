# domains/carriers/views.py
import json
import logging

from django.conf import settings

from drf_spectacular.utils import extend_schema
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from shared.api_markers import ErrorSerializer

logger = logging.getLogger(__name__)


# --------------------------------------------------------------------
# GET /api/carriers
# 디스크의 캐리어 문서를 가공 없이 그대로 전달 (프론트 자동완성용)
# --------------------------------------------------------------------
class CarrierListAPI(APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(operation_id="ListCarriers", responses={200: dict, 500: ErrorSerializer})
    def get(self, request):
        path = settings.CARRIERS_FILE
        if not path.exists():
            return Response(
                {"error": "Carrier list file not found"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        try:
            with open(path, "r", encoding="utf-8") as fp:
                data = json.load(fp)
        except (OSError, ValueError) as e:
            logger.exception("Failed to load carriers: %s", e)
            return Response(
                {"error": str(e) or "Failed to load carriers"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(data, status=status.HTTP_200_OK)
