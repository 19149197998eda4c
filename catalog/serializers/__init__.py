"""
Catalog 앱의 Serializers 패키지
모든 Serializer를 한 곳에서 import 할 수 있도록 export
"""

# 리스트 CRUD Serializers
from .catalog import (
    UserSerializer,
    ArtistSerializer,
    SongSerializer,
    AlbumSerializer,
    CommentSerializer,
    ReplySerializer,
)

# 카운터 Serializers
from .counters import (
    PlayCounterSerializer,
    DownloadCounterSerializer,
)

__all__ = [
    'UserSerializer',
    'ArtistSerializer',
    'SongSerializer',
    'AlbumSerializer',
    'CommentSerializer',
    'ReplySerializer',
    'PlayCounterSerializer',
    'DownloadCounterSerializer',
]
