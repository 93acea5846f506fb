import requests

from campus_finder.notifications.sender import ResendEmailSender


def make_sender():
    return ResendEmailSender('re_key', 'Campus Finder <no-reply@campus.edu>', 'https://api.resend.com/emails')


def test_send_posts_message(monkeypatch, fake_response):
    calls = []

    def post(url, headers=None, json=None):
        calls.append((url, headers, json))
        return fake_response(200, '{"id": "49a3999c"}')

    monkeypatch.setattr(requests, 'post', post)

    result = make_sender().send('a@b.com', 'Subject', '<p>Hi</p>')

    assert result.ok
    assert result.error is None
    assert calls == [(
        'https://api.resend.com/emails',
        {'Authorization': 'Bearer re_key', 'Content-Type': 'application/json'},
        {'from': 'Campus Finder <no-reply@campus.edu>', 'to': 'a@b.com', 'subject': 'Subject', 'html': '<p>Hi</p>'},
    )]


def test_send_reports_provider_rejection(monkeypatch, fake_response):
    monkeypatch.setattr(requests, 'post', lambda *a, **kw: fake_response(403, 'domain not verified'))

    result = make_sender().send('a@b.com', 'Subject', '<p>Hi</p>')

    assert not result.ok
    assert result.error == 'domain not verified'


def test_send_reports_status_when_body_is_empty(monkeypatch, fake_response):
    monkeypatch.setattr(requests, 'post', lambda *a, **kw: fake_response(502, ''))

    result = make_sender().send('a@b.com', 'Subject', '<p>Hi</p>')

    assert result.error == 'HTTP 502'


def test_send_reports_transport_errors(monkeypatch):
    def post(*args, **kwargs):
        raise requests.exceptions.Timeout('read timed out')

    monkeypatch.setattr(requests, 'post', post)

    result = make_sender().send('a@b.com', 'Subject', '<p>Hi</p>')

    assert not result.ok
    assert result.error == 'read timed out'
