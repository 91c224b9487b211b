import pytest

from schemagen.store import FieldRowStore

SCHEMAS = ["public", "application"]
DATA_TYPES = ["bigint", "boolean", "text", "uuid"]


class FakePubSub:
    def __init__(self):
        self.sent = []

    def send_all_on_topic(self, topic, message):
        self.sent.append((topic, message))

    def topics(self):
        return [t for t, _ in self.sent]


@pytest.fixture
def store():
    return FieldRowStore(SCHEMAS, DATA_TYPES)


@pytest.fixture
def pubsub():
    return FakePubSub()
