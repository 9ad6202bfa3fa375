"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.cache_keys import CACHE_TIMEOUT, EVENT_LIST_KEY, event_detail_key
from events.domain.errors import DomainError
from events.handlers.errors import error_response
from events.handlers.permissions import IsAdminSession
from events.handlers.serializers import (
    DashboardSerializer,
    EventInputSerializer,
    EventSerializer,
    LoginSerializer,
)
from events.services import admin_auth
from events.services.event_service import EventService
from events.stores import get_event_store


def get_event_service() -> EventService:
    return EventService(get_event_store())


class EventListView(APIView):
    """Handler for GET /api/events"""

    def get(self, request: Request) -> Response:
        data = cache.get(EVENT_LIST_KEY)
        if data is None:
            events = get_event_service().list_events()
            data = list(EventSerializer(events, many=True).data)
            cache.set(EVENT_LIST_KEY, data, CACHE_TIMEOUT)
        return Response(data)


class EventDetailView(APIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        key = event_detail_key(event_id)
        data = cache.get(key)
        if data is None:
            try:
                event = get_event_service().get_event(event_id)
            except DomainError as e:
                return error_response(e)
            data = dict(EventSerializer(event).data)
            cache.set(key, data, CACHE_TIMEOUT)
        return Response(data)


class AdminLoginView(APIView):
    """Handler for POST /api/admin/login"""

    def post(self, request: Request) -> Response:
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            admin_auth.login(request.session, **serializer.validated_data)
        except DomainError as e:
            return error_response(e)
        return Response({"authenticated": True})


class AdminLogoutView(APIView):
    """Handler for POST /api/admin/logout"""

    permission_classes = [IsAdminSession]

    def post(self, request: Request) -> Response:
        admin_auth.logout(request.session)
        return Response(status=status.HTTP_204_NO_CONTENT)


class AdminDashboardView(APIView):
    """Handler for GET /api/admin/dashboard"""

    permission_classes = [IsAdminSession]

    def get(self, request: Request) -> Response:
        service = get_event_service()
        return Response(
            {
                "stats": DashboardSerializer(service.dashboard()).data,
                "events": EventSerializer(service.list_events(), many=True).data,
            }
        )


class AdminEventListView(APIView):
    """Handler for GET/POST /api/admin/events"""

    permission_classes = [IsAdminSession]

    def get(self, request: Request) -> Response:
        events = get_event_service().list_events()
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            event = get_event_service().create_event(serializer.validated_data)
        except DomainError as e:
            return error_response(e)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class AdminEventDetailView(APIView):
    """Handler for PUT/PATCH/DELETE /api/admin/events/{event_id}"""

    permission_classes = [IsAdminSession]

    def put(self, request: Request, event_id: str) -> Response:
        return self._update(request, event_id, partial=False)

    def patch(self, request: Request, event_id: str) -> Response:
        return self._update(request, event_id, partial=True)

    def delete(self, request: Request, event_id: str) -> Response:
        try:
            get_event_service().delete_event(event_id)
        except DomainError as e:
            return error_response(e)
        return Response(status=status.HTTP_204_NO_CONTENT)

    def _update(self, request: Request, event_id: str, partial: bool) -> Response:
        serializer = EventInputSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        try:
            event = get_event_service().update_event(event_id, serializer.validated_data)
        except DomainError as e:
            return error_response(e)
        return Response(EventSerializer(event).data)
