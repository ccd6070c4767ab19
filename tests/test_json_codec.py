from __future__ import annotations

import json

import pytest

from adapters.json_codec import decode_animals, encode_animals
from core.domain.errors import FormatError
from core.domain.models import Lion, Parrot, Snake


def test_round_trip_preserves_order_and_fields(residents):
    decoded = decode_animals(encode_animals(residents))

    assert decoded == residents
    assert [type(a) for a in decoded] == [Lion, Parrot, Snake]
    assert decoded[1].vocabulary == ("Hello", "Cracker")


def test_encoded_document_uses_discriminator_and_aliases(residents):
    text = encode_animals(residents)
    data = json.loads(text)

    assert data[0] == {"$type": "lion", "Name": "Simba", "Age": 5, "IsAlpha": True}
    assert data[1] == {"$type": "parrot", "Name": "Polly", "Age": 2, "Vocabulary": ["Hello", "Cracker"]}
    assert data[2] == {"$type": "snake", "Name": "Nagini", "Age": 4, "IsVenomous": True}
    # pretty-printed, stable
    assert '\n    "Name": "Simba"' in text
    assert text.endswith("\n")
    assert encode_animals(decode_animals(text)) == text


def test_encode_keeps_unicode_readable():
    text = encode_animals([Lion(name="Åke", age=1, is_alpha=False)])
    assert "Åke" in text


def test_empty_collection():
    assert encode_animals([]) == "[]\n"
    assert decode_animals("[]") == []


def test_null_document_is_empty():
    assert decode_animals("null") == []


def test_decoding_reuses_record_validation():
    text = json.dumps(
        [{"$type": "parrot", "Name": "  Polly ", "Age": 2, "Vocabulary": ["Hi", " hi", ""]}]
    )
    (parrot,) = decode_animals(text)
    assert parrot.name == "Polly"
    assert parrot.vocabulary == ("Hi",)


def test_unknown_keys_are_ignored():
    text = json.dumps([{"$type": "snake", "Name": "Kaa", "Age": 9, "IsVenomous": False, "Color": "green"}])
    assert decode_animals(text) == [Snake(name="Kaa", age=9, is_venomous=False)]


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        '{"$type": "lion", "Name": "Simba", "Age": 5, "IsAlpha": true}',
        '"animals"',
        '[{"Name": "Simba", "Age": 5, "IsAlpha": true}]',
        '[{"$type": "tiger", "Name": "Shere Khan", "Age": 5}]',
        '[{"$type": "lion", "Name": "Simba", "Age": "5", "IsAlpha": true}]',
        '[{"$type": "lion", "Name": "Simba", "Age": 5.5, "IsAlpha": true}]',
        '[{"$type": "lion", "Name": "Simba", "Age": -1, "IsAlpha": true}]',
        '[{"$type": "lion", "Name": "   ", "Age": 5, "IsAlpha": true}]',
        '[{"$type": "lion", "Name": "Simba", "Age": 5}]',
        '[{"$type": "lion", "Age": 5, "IsAlpha": true}]',
        '[{"$type": "snake", "Name": "Kaa", "Age": 5, "IsVenomous": "yes"}]',
        '[{"$type": "parrot", "Name": "Polly", "Age": 2, "Vocabulary": "Hello"}]',
        '[{"$type": "parrot", "Name": "Polly", "Age": 2, "Vocabulary": [1, 2]}]',
        '[{"kind": "lion", "Name": "Simba", "Age": 5, "IsAlpha": true}]',
        '[{"$type": "lion", "name": "Simba", "age": 5, "is_alpha": true}]',
        '[{"kind": "snake", "name": "Kaa", "age": 5, "is_venomous": false}]',
        '[42]',
    ],
)
def test_malformed_documents_raise_format_error(text):
    with pytest.raises(FormatError):
        decode_animals(text)


def test_one_bad_record_fails_the_whole_document():
    text = json.dumps(
        [
            {"$type": "lion", "Name": "Simba", "Age": 5, "IsAlpha": True},
            {"$type": "dragon", "Name": "Smaug", "Age": 171},
        ]
    )
    with pytest.raises(FormatError, match="Malformed"):
        decode_animals(text)


def test_missing_discriminator_is_named_in_the_error():
    text = json.dumps([{"kind": "lion", "Name": "Simba", "Age": 5, "IsAlpha": True}])
    with pytest.raises(FormatError, match=r"\$type"):
        decode_animals(text)
