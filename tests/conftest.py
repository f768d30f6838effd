import pytest

DOCUMENT = '''{
    "number": 1234567891234567891,
    "double": 0.1,
    "simple_string": "string",
    "json_string": "{\\"test\\":1}",
    "nothing": null,
    "config": {"timeout": 30},
    "user": {
        "name": "John",
        "emails": ["john@example.com", "j@test.com"]
    },
    "users": [
        {"name": "alice", "age": 31},
        {"name": "bob", "age": 27}
    ]
}'''


@pytest.fixture
def document():
    return DOCUMENT


@pytest.fixture(params=['str', 'bytes'])
def raw_document(request):
    return DOCUMENT if request.param == 'str' else DOCUMENT.encode()
