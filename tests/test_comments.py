"""Public comments on content items."""

import pytest

from tuskers.errors import NotFound
from tuskers.services.comments import comment_ledger


def _comment(**overrides):
    payload = {
        'contentType': 'hero',
        'contentId': 1,
        'userName': 'Priya',
        'text': 'Great win!',
    }
    payload.update(overrides)
    return payload


class TestComments:

    def test_post_and_list(self, client):
        response = client.post('/api/comments', json=_comment())

        assert response.status_code == 201
        body = response.get_json()
        assert body['contentType'] == 'hero'
        assert body['contentId'] == 1
        assert body['likes'] == 0
        assert body['dislikes'] == 0

        listed = client.get('/api/comments/hero/1').get_json()
        assert [c['text'] for c in listed] == ['Great win!']

    def test_newest_first(self, client):
        client.post('/api/comments', json=_comment(text='first'))
        client.post('/api/comments', json=_comment(text='second'))

        listed = client.get('/api/comments/hero/1').get_json()

        assert [c['text'] for c in listed] == ['second', 'first']

    def test_comments_are_scoped_to_their_key(self, client):
        client.post('/api/comments', json=_comment(contentType='news', contentId=3))

        assert client.get('/api/comments/hero/1').get_json() == []
        assert len(client.get('/api/comments/news/3').get_json()) == 1

    @pytest.mark.parametrize('overrides', [
        {'contentType': 'video'},
        {'contentId': None},
        {'contentId': 'one'},
        {'userName': ''},
        {'text': '   '},
    ])
    def test_invalid_comment(self, client, overrides):
        response = client.post('/api/comments', json=_comment(**overrides))

        assert response.status_code == 400
        assert response.get_json()['message'] == 'Invalid comment data'

    @pytest.mark.parametrize('content_id', [2 ** 31, 2 ** 70])
    def test_content_id_beyond_integer_column(self, client, content_id):
        response = client.post('/api/comments', json=_comment(contentId=content_id))

        assert response.status_code == 400
        assert 'contentId' in response.get_json()['errors']
        assert client.get(f'/api/comments/hero/{content_id}').status_code == 404

    def test_list_unknown_content_type(self, client):
        assert client.get('/api/comments/video/1').status_code == 400

    def test_delete_requires_admin(self, client, auth_headers):
        comment = client.post('/api/comments', json=_comment()).get_json()

        assert client.delete(f"/api/comments/{comment['id']}").status_code == 401
        assert client.delete(f"/api/comments/{comment['id']}", headers=auth_headers).status_code == 204
        assert client.get('/api/comments/hero/1').get_json() == []

    def test_delete_missing_comment(self, client, auth_headers):
        response = client.delete('/api/comments/77', headers=auth_headers)

        assert response.status_code == 404
        assert response.get_json() == {'message': 'Comment not found'}

    def test_ledger_delete_missing(self, app):
        with app.app_context():
            with pytest.raises(NotFound):
                comment_ledger.delete(1)
