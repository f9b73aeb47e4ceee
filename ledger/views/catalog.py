from rest_framework.generics import ListAPIView
from rest_framework.permissions import AllowAny

from ledger.models import Banner, Service
from ledger.serializers import BannerSerializer, ServiceSerializer
from ledger.utils import success_response


class EnvelopeListAPIView(ListAPIView):
    """ListAPIView whose payload is wrapped in the response envelope."""

    success_message = "Success"

    def list(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return success_response(self.success_message, serializer.data)


class BannerListView(EnvelopeListAPIView):
    """GET /banner — Public list of banners."""

    serializer_class = BannerSerializer
    queryset = Banner.objects.all()
    authentication_classes = []
    permission_classes = [AllowAny]


class ServiceListView(EnvelopeListAPIView):
    """GET /services — List of payable services."""

    serializer_class = ServiceSerializer
    queryset = Service.objects.all()
