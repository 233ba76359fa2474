# domains/parcels/views.py
from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiParameter, OpenApiTypes, extend_schema
from rest_framework import parsers, status
from rest_framework.response import Response
from rest_framework.views import APIView

from shared.api_markers import ErrorSerializer
from shared.permissions import shared_secret_required

from .serializers import ParcelUpdateCommandSerializer, ParcelUpdateSerializer
from .services import (
    create_update,
    delete_update,
    fetch_updates,
    normalize_code,
    update_update,
)

logger = logging.getLogger(__name__)


# --------------------------------------------------------------------
# GET  /api/parcel-updates?code=     (누구나)   {code, updates: [...]}
# POST /api/parcel-updates           (시크릿)   mode = CREATE | UPDATE | DELETE
# --------------------------------------------------------------------
class ParcelUpdatesAPI(APIView):
    parser_classes = [parsers.JSONParser]
    permission_classes = [shared_secret_required("PARCEL_UPDATES_SECRET")]

    @extend_schema(
        operation_id="ListParcelUpdates",
        parameters=[
            OpenApiParameter("code", OpenApiTypes.STR, OpenApiParameter.QUERY, required=False,
                             description="운송장 코드 (별칭: parcel, number)"),
        ],
        responses={200: ParcelUpdateSerializer(many=True), 400: ErrorSerializer},
        tags=["parcels"],
    )
    def get(self, request):
        qp = request.query_params
        code = normalize_code(qp.get("code") or qp.get("parcel") or qp.get("number"))
        if not code:
            return Response({"error": "code is required"}, status=status.HTTP_400_BAD_REQUEST)

        updates = ParcelUpdateSerializer(fetch_updates(code), many=True).data
        return Response({"code": code, "updates": updates}, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="ChangeParcelUpdates",
        request=ParcelUpdateCommandSerializer,
        responses={200: ParcelUpdateSerializer, 400: ErrorSerializer, 401: ErrorSerializer, 404: ErrorSerializer},
        tags=["parcels"],
    )
    def post(self, request):
        ser = ParcelUpdateCommandSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        mode = ser.validated_data["mode"]
        code = ser.validated_data["code"]
        data = ser.validated_data["data"]
        update_id = ser.validated_data["update_id"]

        if mode == "CREATE":
            created = create_update(code, data)
            logger.info("parcel update created: code=%s id=%s", code, created.pk)
            return Response({"code": code, "update": ParcelUpdateSerializer(created).data}, status=status.HTTP_200_OK)

        if mode == "UPDATE":
            updated = update_update(code, update_id, data)
            if updated is None:
                return Response({"error": "Update not found"}, status=status.HTTP_404_NOT_FOUND)
            return Response({"code": code, "update": ParcelUpdateSerializer(updated).data}, status=status.HTTP_200_OK)

        removed = delete_update(code, update_id)
        if removed is None:
            return Response({"error": "Update not found"}, status=status.HTTP_404_NOT_FOUND)
        logger.info("parcel update deleted: code=%s id=%s", code, removed.pk)
        return Response({"code": code, "removed": ParcelUpdateSerializer(removed).data}, status=status.HTTP_200_OK)
