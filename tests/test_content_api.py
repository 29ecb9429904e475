"""CRUD, visibility and ordering for hero slides, news, players and gallery."""

import pytest

from tuskers.errors import NotFound
from tuskers.services.content import gallery_items, hero_slides, news_articles, players


def _slide(**overrides):
    payload = {
        'title': 'Season Opener',
        'description': 'First match of the season',
        'date': '15 MAR, 2024',
        'image': 'https://example.com/opener.jpg',
    }
    payload.update(overrides)
    return payload


def _article(**overrides):
    payload = {
        'title': 'Tuskers win the derby',
        'description': 'A last-over finish',
        'content': 'Full match report.',
        'date': '16 MAR, 2024',
        'image': 'https://example.com/derby.jpg',
    }
    payload.update(overrides)
    return payload


def _player(**overrides):
    payload = {
        'name': 'Asha Kumar',
        'role': 'Batsman',
        'jerseyNumber': 7,
        'image': 'https://example.com/asha.jpg',
    }
    payload.update(overrides)
    return payload


def _gallery_item(**overrides):
    payload = {
        'title': 'Nets session',
        'image': 'https://example.com/nets.jpg',
        'date': '10 MAR, 2024',
    }
    payload.update(overrides)
    return payload


class TestHeroSlides:

    def test_create_applies_defaults(self, client, auth_headers):
        response = client.post('/api/hero-slides', json=_slide(), headers=auth_headers)

        assert response.status_code == 201
        body = response.get_json()
        assert body['id'] > 0
        assert body['isActive'] is True
        assert body['order'] == 0
        assert body['createdAt']

    def test_public_list_is_ordered_by_display_order(self, client, auth_headers):
        client.post('/api/hero-slides', json=_slide(title='Second', order=2), headers=auth_headers)
        client.post('/api/hero-slides', json=_slide(title='First', order=1), headers=auth_headers)

        response = client.get('/api/hero-slides')

        assert response.status_code == 200
        assert [s['order'] for s in response.get_json()] == [1, 2]
        assert [s['title'] for s in response.get_json()] == ['First', 'Second']

    def test_equal_order_falls_back_to_creation(self, client, auth_headers):
        first = client.post('/api/hero-slides', json=_slide(title='A'), headers=auth_headers).get_json()
        second = client.post('/api/hero-slides', json=_slide(title='B'), headers=auth_headers).get_json()

        ids = [s['id'] for s in client.get('/api/hero-slides').get_json()]

        assert ids == [first['id'], second['id']]

    def test_inactive_slides_are_admin_only(self, client, auth_headers):
        client.post('/api/hero-slides', json=_slide(title='Live'), headers=auth_headers)
        client.post('/api/hero-slides', json=_slide(title='Draft', isActive=False), headers=auth_headers)

        public = client.get('/api/hero-slides').get_json()
        admin = client.get('/api/admin/hero-slides', headers=auth_headers).get_json()

        assert [s['title'] for s in public] == ['Live']
        assert sorted(s['title'] for s in admin) == ['Draft', 'Live']

    def test_update_replaces_fields(self, client, auth_headers):
        created = client.post('/api/hero-slides', json=_slide(), headers=auth_headers).get_json()

        response = client.put(
            f"/api/hero-slides/{created['id']}",
            json=_slide(title='Renamed', order=5, isActive=False),
            headers=auth_headers,
        )

        assert response.status_code == 200
        body = response.get_json()
        assert body['title'] == 'Renamed'
        assert body['order'] == 5
        assert body['isActive'] is False
        assert body['createdAt'] == created['createdAt']

    def test_invalid_body_is_rejected_whole(self, client, auth_headers):
        response = client.post('/api/hero-slides', json=_slide(title='', order='soon'), headers=auth_headers)

        assert response.status_code == 400
        body = response.get_json()
        assert body['message'] == 'Invalid hero slide data'
        assert set(body['errors']) == {'title', 'order'}
        assert client.get('/api/admin/hero-slides', headers=auth_headers).get_json() == []

    def test_delete_then_missing(self, client, auth_headers):
        created = client.post('/api/hero-slides', json=_slide(), headers=auth_headers).get_json()

        response = client.delete(f"/api/hero-slides/{created['id']}", headers=auth_headers)
        assert response.status_code == 204
        assert response.data == b''

        again = client.delete(f"/api/hero-slides/{created['id']}", headers=auth_headers)
        assert again.status_code == 404
        assert again.get_json() == {'message': 'Hero slide not found'}

    def test_update_missing_slide(self, client, auth_headers):
        response = client.put('/api/hero-slides/999', json=_slide(), headers=auth_headers)

        assert response.status_code == 404

    def test_ids_are_not_reused_after_delete(self, client, auth_headers):
        first = client.post('/api/hero-slides', json=_slide(), headers=auth_headers).get_json()
        client.delete(f"/api/hero-slides/{first['id']}", headers=auth_headers)

        second = client.post('/api/hero-slides', json=_slide(), headers=auth_headers).get_json()

        assert second['id'] > first['id']


class TestNews:

    def test_list_is_newest_first_with_limit(self, client, auth_headers):
        ids = [
            client.post('/api/news', json=_article(title=f'Story {n}'), headers=auth_headers).get_json()['id']
            for n in range(3)
        ]

        listed = client.get('/api/news').get_json()
        limited = client.get('/api/news?limit=2').get_json()

        assert [a['id'] for a in listed] == list(reversed(ids))
        assert [a['id'] for a in limited] == list(reversed(ids))[:2]

    @pytest.mark.parametrize('limit', ['0', '-3', 'ten', '1.5', str(2 ** 31), str(2 ** 70)])
    def test_bad_limit_is_rejected(self, client, limit):
        response = client.get(f'/api/news?limit={limit}')

        assert response.status_code == 400
        assert 'message' in response.get_json()

    def test_unpublished_article_is_hidden_from_public(self, client, auth_headers):
        draft = client.post('/api/news', json=_article(isPublished=False), headers=auth_headers).get_json()

        assert client.get('/api/news').get_json() == []
        public = client.get(f"/api/news/{draft['id']}")
        assert public.status_code == 404
        assert public.get_json() == {'message': 'Article not found'}

        admin = client.get(f"/api/admin/news/{draft['id']}", headers=auth_headers)
        assert admin.status_code == 200
        assert admin.get_json()['isPublished'] is False

    def test_get_published_article(self, client, auth_headers):
        created = client.post('/api/news', json=_article(), headers=auth_headers).get_json()

        response = client.get(f"/api/news/{created['id']}")

        assert response.status_code == 200
        assert response.get_json()['content'] == 'Full match report.'

    def test_missing_required_field(self, client, auth_headers):
        payload = _article()
        del payload['content']

        response = client.post('/api/news', json=payload, headers=auth_headers)

        assert response.status_code == 400
        assert response.get_json()['message'] == 'Invalid news article data'
        assert 'content' in response.get_json()['errors']

    def test_delete_article(self, client, auth_headers):
        created = client.post('/api/news', json=_article(), headers=auth_headers).get_json()

        assert client.delete(f"/api/news/{created['id']}", headers=auth_headers).status_code == 204
        assert client.get(f"/api/admin/news/{created['id']}", headers=auth_headers).status_code == 404


class TestPlayers:

    def test_roster_is_ordered_by_jersey_number(self, client, auth_headers):
        for number in (18, 3, 45):
            client.post('/api/players', json=_player(jerseyNumber=number), headers=auth_headers)

        roster = client.get('/api/players').get_json()

        assert [p['jerseyNumber'] for p in roster] == [3, 18, 45]

    def test_jersey_number_zero_is_accepted(self, client, auth_headers):
        response = client.post('/api/players', json=_player(jerseyNumber=0), headers=auth_headers)

        assert response.status_code == 201
        assert response.get_json()['jerseyNumber'] == 0

    @pytest.mark.parametrize('jersey', [None, 'seven', 7.5, True, -1, 2 ** 70, 1e30])
    def test_bad_jersey_number(self, client, auth_headers, jersey):
        response = client.post('/api/players', json=_player(jerseyNumber=jersey), headers=auth_headers)

        assert response.status_code == 400
        assert 'jerseyNumber' in response.get_json()['errors']

    def test_inactive_players_are_admin_only(self, client, auth_headers):
        client.post('/api/players', json=_player(name='Benched', isActive=False), headers=auth_headers)
        client.post('/api/players', json=_player(name='Starter', isCaptain=True), headers=auth_headers)

        public = client.get('/api/players').get_json()
        admin = client.get('/api/admin/players', headers=auth_headers).get_json()

        assert [p['name'] for p in public] == ['Starter']
        assert public[0]['isCaptain'] is True
        assert len(admin) == 2


class TestGallery:

    def test_category_defaults_to_photos(self, client, auth_headers):
        response = client.post('/api/gallery', json=_gallery_item(), headers=auth_headers)

        assert response.status_code == 201
        assert response.get_json()['category'] == 'Photos'
        assert response.get_json()['isVisible'] is True

    def test_hidden_items_and_limit(self, client, auth_headers):
        client.post('/api/gallery', json=_gallery_item(title='Hidden', isVisible=False), headers=auth_headers)
        for n in range(3):
            client.post('/api/gallery', json=_gallery_item(title=f'Shot {n}'), headers=auth_headers)

        assert len(client.get('/api/gallery').get_json()) == 3
        assert [i['title'] for i in client.get('/api/gallery?limit=1').get_json()] == ['Shot 2']
        assert len(client.get('/api/admin/gallery', headers=auth_headers).get_json()) == 4

    def test_update_gallery_item(self, client, auth_headers):
        created = client.post('/api/gallery', json=_gallery_item(), headers=auth_headers).get_json()

        response = client.put(
            f"/api/gallery/{created['id']}",
            json=_gallery_item(category='Videos'),
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.get_json()['category'] == 'Videos'


class TestServices:

    @pytest.mark.parametrize('service', [hero_slides, news_articles, players, gallery_items])
    def test_delete_missing_raises_not_found(self, app, service):
        with app.app_context():
            with pytest.raises(NotFound):
                service.delete(12345)

    def test_public_get_applies_visibility(self, app):
        with app.app_context():
            article = news_articles.create({
                'title': 'Draft',
                'description': 'd',
                'content': 'c',
                'date': '1 JAN, 2024',
                'image': 'img',
                'is_published': False,
            })

            assert news_articles.get(article.id).title == 'Draft'
            with pytest.raises(NotFound):
                news_articles.get(article.id, include_hidden=False)

    def test_protected_fields_are_ignored(self, app):
        with app.app_context():
            slide = hero_slides.create({
                'id': 999,
                'title': 't',
                'description': 'd',
                'date': 'x',
                'image': 'i',
            })

            assert slide.id != 999
