from __future__ import annotations

import pytest
from yarl import URL

from asciinema_api.errors import ApplicationError, DecodeError, HttpStatusError
from asciinema_api.responses import (
    RECORDING_TOO_LARGE_MESSAGE,
    RawResponse,
    interpret_recording_response,
    interpret_stream_list_response,
    interpret_stream_response,
    try_decode_error,
)

SERVER = URL('https://asciinema.example.org')
STREAM_BODY = '{"id": 42, "ws_producer_url": "wss://asciinema.example.org/ws/s/abc", "url": "https://asciinema.example.org/s/abc"}'


def raw(status, body='', path='/api/v1/streams'):
    return RawResponse(status=status, body=body, url=SERVER.with_path(path))


@pytest.mark.parametrize('body', ['', 'not json', '{"error": "nope"}', '[]', '"message"', '{"message": 5}'])
def test_try_decode_error_returns_none_for_unstructured_bodies(body):
    assert try_decode_error(body) is None


def test_try_decode_error_returns_message():
    assert try_decode_error('{"message": "too big", "extra": 1}') == 'too big'


class TestRecordingResponse:
    def test_413_with_message(self):
        with pytest.raises(ApplicationError) as excinfo:
            interpret_recording_response(raw(413, '{"message": "too big"}'))
        assert excinfo.value.message == 'too big'
        assert excinfo.value.status == 413

    def test_413_without_parseable_body(self):
        with pytest.raises(ApplicationError) as excinfo:
            interpret_recording_response(raw(413, '<html>Request Entity Too Large</html>'))
        assert excinfo.value.message == RECORDING_TOO_LARGE_MESSAGE

    def test_other_errors_are_generic(self):
        with pytest.raises(HttpStatusError) as excinfo:
            interpret_recording_response(raw(500, '{"message": "boom"}'))
        assert excinfo.value.status == 500
        assert '500' in excinfo.value.message

    def test_401_on_upload_is_generic(self):
        with pytest.raises(HttpStatusError):
            interpret_recording_response(raw(401))

    def test_success(self):
        result = interpret_recording_response(raw(201, '{"url": "https://asciinema.example.org/a/1"}'))
        assert result.url == 'https://asciinema.example.org/a/1'
        assert result.message is None
        assert result.display_text == result.url

    def test_message_preferred_for_display(self):
        result = interpret_recording_response(raw(200, '{"url": "u", "message": "View it at u"}'))
        assert result.display_text == 'View it at u'

    def test_malformed_success(self):
        with pytest.raises(DecodeError):
            interpret_recording_response(raw(200, '{"message": "no url"}'))


class TestStreamResponse:
    def test_401_names_host_and_suggests_auth(self):
        with pytest.raises(ApplicationError) as excinfo:
            interpret_stream_response(raw(401), SERVER)
        assert 'asciinema.example.org' in excinfo.value.message
        assert 'asciinema auth' in excinfo.value.message

    @pytest.mark.parametrize('status', [404, 422])
    def test_unstructured_body_means_streaming_unsupported(self, status):
        with pytest.raises(ApplicationError) as excinfo:
            interpret_stream_response(raw(status, 'Not Found'), SERVER)
        assert excinfo.value.message == "asciinema.example.org doesn't support streaming"
        assert excinfo.value.status == status

    @pytest.mark.parametrize('status', [404, 422])
    def test_structured_body_message_is_used(self, status):
        with pytest.raises(ApplicationError) as excinfo:
            interpret_stream_response(raw(status, '{"message": "stream not found"}'), SERVER)
        assert excinfo.value.message == 'stream not found'

    def test_413_is_generic_for_streams(self):
        with pytest.raises(HttpStatusError) as excinfo:
            interpret_stream_response(raw(413, '{"message": "too big"}'), SERVER)
        assert excinfo.value.status == 413

    def test_success_fields(self):
        handle = interpret_stream_response(raw(200, STREAM_BODY), SERVER)
        assert handle.id == 42
        assert handle.producer_endpoint == 'wss://asciinema.example.org/ws/s/abc'
        assert handle.view_url == 'https://asciinema.example.org/s/abc'

    def test_missing_field_is_decode_error_not_application_error(self):
        with pytest.raises(DecodeError) as excinfo:
            interpret_stream_response(raw(200, '{"id": 42, "url": "u"}'), SERVER)
        assert not isinstance(excinfo.value, ApplicationError)

    def test_negative_id_is_rejected(self):
        with pytest.raises(DecodeError):
            interpret_stream_response(raw(200, '{"id": -1, "ws_producer_url": "w", "url": "u"}'), SERVER)

    def test_list(self):
        streams = interpret_stream_list_response(raw(200, f'[{STREAM_BODY}]'), SERVER)
        assert [s.id for s in streams] == [42]

    def test_list_expects_array(self):
        with pytest.raises(DecodeError):
            interpret_stream_list_response(raw(200, STREAM_BODY), SERVER)
