import json
import logging

logger = logging.getLogger(__name__)

MASKED_FIELDS = ("password",)


def mask_body(raw: str) -> str:
    """Replace sensitive JSON fields (passwords) before the body is logged."""
    try:
        payload = json.loads(raw)
    except ValueError:
        return raw
    if isinstance(payload, dict):
        for field in MASKED_FIELDS:
            if field in payload:
                payload[field] = "***"
    return json.dumps(payload)


class RequestResponseLoggingMiddleware:
    """
    Middleware that logs each request method, path, body,
    and the corresponding response envelope.

    Password fields are masked and profile image uploads are not logged.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request_body = ""
        content_type = request.META.get("CONTENT_TYPE", "")

        # Skip logging body for profile image uploads
        if "multipart/form-data" in content_type:
            request_body = "<Multipart form data - body not logged>"
        elif request.method in ["POST", "PUT", "PATCH"] and request.body:
            try:
                request_body = mask_body(request.body.decode("utf-8"))
            except UnicodeDecodeError:
                request_body = "<Could not decode body>"

        logger.info(
            "API Request: %s %s Body: %s",
            request.method,
            request.get_full_path(),
            request_body,
        )

        response = self.get_response(request)

        response_type = response.get("Content-Type", "")
        if response_type.startswith("application/json") and hasattr(response, "content"):
            try:
                response_content = response.content.decode("utf-8")
            except UnicodeDecodeError:
                response_content = "<Could not decode content>"
        elif hasattr(response, "streaming_content"):
            response_content = "<Streaming content>"
        else:
            response_content = f"<Content-Type: {response_type}>"

        logger.info(
            "API Response: %s %s Status: %s Content: %s",
            request.method,
            request.get_full_path(),
            response.status_code,
            response_content,
        )

        return response
