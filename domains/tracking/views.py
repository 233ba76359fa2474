# domains/tracking/views.py
from drf_spectacular.utils import extend_schema
from rest_framework import parsers, permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from domains.carriers.apps import get_directory
from shared.api_markers import ErrorSerializer

from .serializers import TrackRequestSerializer, TrackResultSerializer
from .services import TrackingOrchestrator


# --------------------------------------------------------------------
# POST /api/track
# body: {number, carrier?, carrierText?}
# 응답: {register, info, stop} 또는 {error, detail} (업스트림 상태코드 전달)
# --------------------------------------------------------------------
class TrackAPI(APIView):
    parser_classes = [parsers.JSONParser]
    permission_classes = [permissions.AllowAny]

    def get_orchestrator(self) -> TrackingOrchestrator:
        return TrackingOrchestrator(directory=get_directory())

    @extend_schema(
        operation_id="TrackParcel",
        request=TrackRequestSerializer,
        responses={200: TrackResultSerializer, 400: ErrorSerializer, 500: ErrorSerializer},
    )
    def post(self, request):
        ser = TrackRequestSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        # TrackingError 는 shared.exceptions 핸들러가 {error, detail} 로 변환
        result = self.get_orchestrator().track(
            data.get("number"),
            carrier_code=data.get("carrier"),
            carrier_text=data.get("carrierText"),
        )
        return Response(result.as_dict(), status=status.HTTP_200_OK)
