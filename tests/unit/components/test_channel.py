"""UploadChannel tests"""
import pytest

from media_gallery.components.channel import UploadChannel


@pytest.mark.unit
class TestUploadChannel:

    def test_publish_reaches_every_listener(self):
        channel = UploadChannel()
        first, second = [], []
        channel.subscribe(first.append)
        channel.subscribe(second.append)

        channel.publish("https://x/d.png")

        assert first == ["https://x/d.png"]
        assert second == ["https://x/d.png"]

    def test_unsubscribed_listener_is_not_called(self):
        channel = UploadChannel()
        received = []
        channel.subscribe(received.append)
        channel.unsubscribe(received.append)

        channel.publish("https://x/d.png")

        assert received == []
        assert channel.listener_count == 0

    def test_subscribe_twice_registers_once(self):
        channel = UploadChannel()
        received = []
        channel.subscribe(received.append)
        channel.subscribe(received.append)

        channel.publish("https://x/d.png")

        assert received == ["https://x/d.png"]

    def test_unsubscribe_unknown_listener_is_ignored(self):
        UploadChannel().unsubscribe(print)
