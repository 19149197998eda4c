"""
Catalog 앱의 Views 패키지
모든 View를 한 곳에서 import 할 수 있도록 export
"""

# 공통 유틸리티
from .common import CatalogPagination, HealthCheckView

# 리스트 CRUD ViewSets
from .catalog import (
    UserViewSet,
    ArtistViewSet,
    SongViewSet,
    AlbumViewSet,
    CommentViewSet,
    ReplyViewSet,
)

# 카운터 Views
from .counters import PlayCounterView, DownloadCounterView

# 검색 View (SONG_SEARCH_ENABLED일 때만 라우팅)
from .search import SongSearchView
