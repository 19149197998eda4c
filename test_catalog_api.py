"""
카탈로그 API 테스트 (/api/v1/)
"""
import json

import pytest
from django.urls import reverse

from catalog.models import Artist, Comment, Song
from conftest import image_upload, mp3_upload

pytestmark = pytest.mark.django_db


class TestSongApi:
    def test_list_is_public_and_paginated(self, api_client, artist):
        song = Song.objects.create(title='Essence', genre='Afrobeats')
        song.artists.add(artist)

        response = api_client.get(reverse('catalog:song-list'))

        assert response.status_code == 200
        assert response.data['count'] == 1
        result = response.data['results'][0]
        assert result['title'] == 'Essence'
        assert result['artist_names'] == ['Wizkid']
        assert result['listened_count'] == 0
        assert result['featuring'] == {'features': {'artist_name': False}}

    def test_search_filter(self, api_client, artist):
        Song.objects.create(title='Essence').artists.add(artist)
        Song.objects.create(title='Calm Down')

        response = api_client.get(reverse('catalog:song-list'), {'search': 'wizkid'})

        assert [s['title'] for s in response.data['results']] == ['Essence']

    def test_anonymous_cannot_create(self, api_client):
        response = api_client.post(reverse('catalog:song-list'), {'title': 'Essence'}, format='json')

        assert response.status_code in (401, 403)
        assert not Song.objects.exists()

    def test_upload_runs_song_hook(self, auth_client, media_root, artist, album):
        response = auth_client.post(
            reverse('catalog:song-list'),
            {
                'title': 'Essence',
                'genre': 'Afrobeats',
                'artists': [artist.pk],
                'albums': [album.pk],
                'featuring': json.dumps({'features': {'artist_name': 'Tems'}}),
                'song_file': mp3_upload('essence-final.mp3'),
                'cover': image_upload('essence.png'),
            },
            format='multipart',
        )

        assert response.status_code == 201, response.data
        assert 'Essence-by-Wizkid-ft-Tems-Kidaaa-com.mp3' in response.data['song_file']
        assert response.data['cover_width'] == 200

        song = Song.objects.get(title='Essence')
        assert song.song_file.name == 'files/Essence-by-Wizkid-ft-Tems-Kidaaa-com.mp3'
        assert song.cover.name == 'images/essence.webp'
        assert (media_root / song.song_file.name).exists()

    def test_update_without_file_does_not_run_hook(self, auth_client, media_root):
        song = Song.objects.create(title='Essence', song_file=mp3_upload('raw.mp3'))

        response = auth_client.patch(
            reverse('catalog:song-detail', args=[song.pk]), {'genre': 'Pop'}, format='json'
        )

        assert response.status_code == 200
        song.refresh_from_db()
        assert song.song_file.name == 'files/raw.mp3'

    def test_rejects_non_mp3_upload(self, auth_client):
        from django.core.files.uploadedfile import SimpleUploadedFile

        response = auth_client.post(
            reverse('catalog:song-list'),
            {'title': 'Essence', 'song_file': SimpleUploadedFile('essence.wav', b'RIFF....')},
            format='multipart',
        )

        assert response.status_code == 400
        assert 'song_file' in response.data

    def test_rejects_upload_over_size_limit(self, settings, auth_client):
        settings.MAX_UPLOAD_SIZE = 1024

        response = auth_client.post(
            reverse('catalog:song-list'),
            {'title': 'Essence', 'song_file': mp3_upload()},
            format='multipart',
        )

        assert response.status_code == 400
        assert 'song_file' in response.data

    def test_rejects_malformed_featuring(self, auth_client):
        response = auth_client.post(
            reverse('catalog:song-list'),
            {'title': 'Essence', 'featuring': {'features': 'Tems'}},
            format='json',
        )

        assert response.status_code == 400
        assert 'featuring' in response.data

    def test_title_is_unique(self, auth_client):
        Song.objects.create(title='Essence')

        response = auth_client.post(reverse('catalog:song-list'), {'title': 'Essence'}, format='json')

        assert response.status_code == 400
        assert 'title' in response.data


class TestArtistApi:
    def test_avatar_upload_is_converted(self, auth_client, media_root):
        response = auth_client.post(
            reverse('catalog:artist-list'),
            {'name': 'Tems', 'genre': 'R&B', 'avatar': image_upload('tems.jpg', fmt='JPEG')},
            format='multipart',
        )

        assert response.status_code == 201, response.data
        assert response.data['avatar'].endswith('images/profiles/tems.webp')
        assert response.data['avatar_width'] == 200
        assert response.data['avatar_height'] == 200
        assert not (media_root / 'images/profiles/tems.jpg').exists()

    def test_reverse_relations_are_writable(self, auth_client):
        song = Song.objects.create(title='Essence')

        response = auth_client.post(
            reverse('catalog:artist-list'), {'name': 'Tems', 'songs': [song.pk]}, format='json'
        )

        assert response.status_code == 201
        assert list(Artist.objects.get(name='Tems').songs.all()) == [song]

    def test_album_lists_artist_names(self, api_client, album):
        response = api_client.get(reverse('catalog:album-detail', args=[album.pk]))

        assert response.status_code == 200
        assert response.data['artist_names'] == ['Wizkid']
        assert response.data['featuring'] == {'features': False, 'moreInfo': False}


class TestCommentApi:
    def test_anonymous_can_comment_and_reply(self, api_client):
        song = Song.objects.create(title='Essence')

        response = api_client.post(
            reverse('catalog:comment-list'),
            {'name': 'Ada', 'email': 'ada@example.com', 'content': 'Banger!', 'songs': [song.pk]},
            format='json',
        )
        assert response.status_code == 201
        comment = Comment.objects.get(pk=response.data['id'])
        assert list(song.comments.all()) == [comment]

        response = api_client.post(
            reverse('catalog:reply-list'),
            {'name': 'Tunde', 'content': 'Agreed', 'comments': [comment.pk]},
            format='json',
        )
        assert response.status_code == 201
        assert comment.replies.get().name == 'Tunde'

    def test_comment_email_is_unique(self, api_client):
        Comment.objects.create(name='Ada', email='ada@example.com')

        response = api_client.post(
            reverse('catalog:comment-list'),
            {'name': 'Ada again', 'email': 'ada@example.com'},
            format='json',
        )

        assert response.status_code == 400
        assert 'email' in response.data

    def test_anonymous_cannot_delete_comment(self, api_client):
        comment = Comment.objects.create(name='Ada', email='ada@example.com')

        response = api_client.delete(reverse('catalog:comment-detail', args=[comment.pk]))

        assert response.status_code in (401, 403)
        assert Comment.objects.filter(pk=comment.pk).exists()


class TestUsersAndAuth:
    def test_users_are_admin_only(self, api_client, auth_client, admin_user):
        assert api_client.get(reverse('catalog:user-list')).status_code in (401, 403)
        assert auth_client.get(reverse('catalog:user-list')).status_code == 403

        api_client.force_authenticate(user=admin_user)
        response = api_client.get(reverse('catalog:user-list'))
        assert response.status_code == 200
        assert 'password' not in response.data['results'][0]

    def test_admin_creates_user_with_hashed_password(self, api_client, admin_user):
        api_client.force_authenticate(user=admin_user)

        response = api_client.post(
            reverse('catalog:user-list'),
            {'name': 'New Editor', 'email': 'new@kidaaa.com', 'password': 'long-enough-pw'},
            format='json',
        )

        assert response.status_code == 201
        from catalog.models import User
        created = User.objects.get(email='new@kidaaa.com')
        assert created.check_password('long-enough-pw')

    def test_obtain_jwt_with_email_and_password(self, api_client, user):
        response = api_client.post(
            reverse('catalog:token_obtain_pair'),
            {'email': 'editor@kidaaa.com', 'password': 's3cret-pass!'},
            format='json',
        )

        assert response.status_code == 200
        assert 'access' in response.data and 'refresh' in response.data

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['access']}")
        created = api_client.post(reverse('catalog:album-list'), {'title': 'Made in Lagos'}, format='json')
        assert created.status_code == 201


def test_healthcheck(api_client):
    response = api_client.get('/_healthcheck')

    assert response.status_code == 200
    assert response.data['status'] == 'pass'
    assert isinstance(response.data['timestamp'], int)
