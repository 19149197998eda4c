"""
모델, 매니저, 파일명/태그 유틸리티 테스트
"""
import pytest
from django.core.exceptions import ValidationError
from django.core.files.uploadedfile import SimpleUploadedFile

from catalog.models import Album, Song, User
from catalog.utils.files import available_name, validate_upload_size
from catalog.utils.id3_tags import brand_slug, build_song_filename, build_song_tags, feature_suffix
from catalog.utils.image_resizer import webp_name


@pytest.mark.django_db
class TestUserManager:
    def test_create_user_hashes_password_and_normalizes_email(self):
        user = User.objects.create_user(email='Ada@KIDAAA.COM', name='Ada', password='s3cret-pass!')

        assert user.email == 'Ada@kidaaa.com'
        assert user.password != 's3cret-pass!'
        assert user.check_password('s3cret-pass!')
        assert not user.is_staff and not user.is_superuser

    def test_create_superuser_sets_flags(self):
        admin = User.objects.create_superuser(email='admin@kidaaa.com', name='Admin', password='pw')

        assert admin.is_staff and admin.is_superuser

    @pytest.mark.parametrize('email,name', [('', 'Ada'), ('ada@kidaaa.com', '')])
    def test_email_and_name_are_required(self, email, name):
        with pytest.raises(ValueError):
            User.objects.create_user(email=email, name=name, password='pw')

    def test_superuser_flags_cannot_be_disabled(self):
        with pytest.raises(ValueError):
            User.objects.create_superuser(email='admin@kidaaa.com', name='Admin', is_staff=False)


@pytest.mark.django_db
class TestDefaults:
    def test_song_defaults(self):
        song = Song.objects.create(title='Essence')

        assert song.listened_count == 0
        assert song.downloads == 0
        assert song.featuring == {'features': {'artist_name': False}}
        assert song.song_file.name in ('', None)

    def test_album_featuring_default(self):
        assert Album.objects.create(title='Made in Lagos').featuring == {'features': False, 'moreInfo': False}

    def test_defaults_are_not_shared(self):
        first = Song.objects.create(title='One')
        first.featuring['features']['artist_name'] = 'Tems'
        first.save()

        assert Song.objects.create(title='Two').featuring == {'features': {'artist_name': False}}


class TestFeaturedArtistName:
    @pytest.mark.parametrize('featuring,expected', [
        ({'features': {'artist_name': 'Tems'}}, 'Tems'),
        ({'features': {'artist_name': False}}, None),
        ({'features': {'artist_name': ''}}, None),
        ({'features': False}, None),
        ({}, None),
        (None, None),
    ])
    def test_featured_artist_name(self, featuring, expected):
        assert Song(title='Essence', featuring=featuring).featured_artist_name == expected


class TestSongNaming:
    def test_feature_suffix(self):
        assert feature_suffix('Tems') == '-ft-Tems'
        assert feature_suffix(None) == ''
        assert feature_suffix(False) == ''

    def test_brand_slug(self):
        assert brand_slug('Kidaaa.com') == 'Kidaaa-com'
        assert brand_slug('adire.pw') == 'adire-pw'

    def test_filename_with_and_without_feature(self):
        assert build_song_filename('Essence', 'Wizkid', 'Kidaaa.com', featured='Tems') == \
            'Essence-by-Wizkid-ft-Tems-Kidaaa-com.mp3'
        assert build_song_filename('Essence', 'Wizkid', 'Kidaaa.com') == 'Essence-by-Wizkid-Kidaaa-com.mp3'

    def test_filename_is_filesystem_safe(self):
        assert build_song_filename('Love Me / Leave Me', 'Rema', 'Kidaaa.com') == \
            'Love_Me__Leave_Me-by-Rema-Kidaaa-com.mp3'

    def test_tags(self):
        tags = build_song_tags('Essence', 'Wizkid', 'Kidaaa.com', featured='Tems', genre='Afrobeats')

        assert tags.title == 'Essence || Kidaaa.com'
        assert tags.artist == 'Wizkid-ft-Tems'
        assert tags.comment == 'From the possession of Kidaaa.com'
        assert tags.album is None
        assert tags.genre == 'Afrobeats'

    def test_tags_without_artist(self):
        assert build_song_tags('Essence', None, 'Kidaaa.com').artist == 'Unknown Artist'

    def test_webp_name(self):
        assert webp_name('images/profiles/tems.jpg') == 'images/profiles/tems.webp'
        assert webp_name('images/soco') == 'images/soco.webp'


class TestUploadValidation:
    def test_upload_within_limit(self, settings):
        settings.MAX_UPLOAD_SIZE = 10
        validate_upload_size(SimpleUploadedFile('a.mp3', b'x' * 10))

    def test_upload_over_limit(self, settings):
        settings.MAX_UPLOAD_SIZE = 10
        with pytest.raises(ValidationError):
            validate_upload_size(SimpleUploadedFile('a.mp3', b'x' * 11))


def test_available_name_allows_current_name(media_root):
    taken = media_root / 'files' / 'essence.mp3'
    taken.parent.mkdir(parents=True)
    taken.write_bytes(b'x')

    assert available_name('files/essence.mp3', current='files/essence.mp3') == 'files/essence.mp3'
    assert available_name('files/essence.mp3') != 'files/essence.mp3'
    assert available_name('files/other.mp3') == 'files/other.mp3'
