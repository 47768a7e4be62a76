"""
JWT Cookie Authentication

리뷰 작성/투표 API의 작성자(actor)를 식별하기 위한 인증 클래스.
토큰 발급은 외부 인증 서비스의 책임이며 여기서는 검증만 합니다.
"""

from django.conf import settings
from drf_spectacular.extensions import OpenApiAuthenticationExtension
from rest_framework_simplejwt.authentication import JWTAuthentication


class JWTCookieAuthentication(JWTAuthentication):
    """
    1) Authorization 헤더 (Bearer)
    2) Cookie (기본 이름 access_token)
    순으로 토큰을 찾아 인증.
    """

    def authenticate(self, request):
        header = super().authenticate(request)
        if header is not None:
            return header

        cookie_name = getattr(settings, "JWT_AUTH_COOKIE", "access_token")
        raw = request.COOKIES.get(cookie_name)
        if not raw:
            return None

        validated = self.get_validated_token(raw)
        return self.get_user(validated), validated


class JWTCookieAuthenticationScheme(OpenApiAuthenticationExtension):
    """drf-spectacular 스키마에 쿠키/헤더 JWT 인증을 노출."""

    target_class = "common.authentication.JWTCookieAuthentication"
    name = "jwtAuth"
    priority = 1

    def get_security_definition(self, auto_schema):
        return {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
            "description": "Authorization: Bearer <token> 또는 access_token 쿠키",
        }
