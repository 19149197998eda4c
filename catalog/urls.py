"""
Catalog 앱의 URL 라우팅
"""
from django.conf import settings
from django.urls import include, path
from rest_framework.routers import DefaultRouter
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from .views import (
    AlbumViewSet,
    ArtistViewSet,
    CommentViewSet,
    DownloadCounterView,
    PlayCounterView,
    ReplyViewSet,
    SongSearchView,
    SongViewSet,
    UserViewSet,
)

app_name = 'catalog'

router = DefaultRouter()
router.register('users', UserViewSet, basename='user')
router.register('artists', ArtistViewSet, basename='artist')
router.register('songs', SongViewSet, basename='song')
router.register('albums', AlbumViewSet, basename='album')
router.register('comments', CommentViewSet, basename='comment')
router.register('replies', ReplyViewSet, basename='reply')

urlpatterns = [
    # 리스트 CRUD
    path('v1/', include(router.urls)),

    # 인증 (email + password -> JWT)
    path('auth/token/', TokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('auth/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),

    # 카운터 (프론트엔드 플레이어)
    path('ping', PlayCounterView.as_view(), name='play_counter'),
    path('updatedownload', DownloadCounterView.as_view(), name='download_counter'),
]

if settings.SONG_SEARCH_ENABLED:
    urlpatterns += [
        path('search/<str:search_data>', SongSearchView.as_view(), name='song_search'),
    ]
