"""
프로젝트 메인 URL 설정 파일
"""
from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from catalog.views import HealthCheckView

urlpatterns = [
    path('admin/', admin.site.urls),
    # 카탈로그 API (CRUD, 인증, 카운터)
    path('api/', include('catalog.urls')),
    # Swagger/OpenAPI 문서
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    # 헬스 체크
    path('_healthcheck', HealthCheckView.as_view(), name='healthcheck'),
    # Prometheus 메트릭 엔드포인트
    path('metrics/', include('django_prometheus.urls')),
]


# 개발 환경(DEBUG=True)에서 업로드된 곡/이미지 파일 서빙
# 프로덕션 환경에서는 웹 서버(Nginx 등)가 직접 미디어 파일을 서빙해야 합니다.
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
