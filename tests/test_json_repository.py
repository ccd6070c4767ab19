from __future__ import annotations

import json

import pytest

from adapters.json_repository import JsonAnimalRepository
from adapters.memory_repository import InMemoryAnimalRepository
from core.domain.errors import FormatError
from core.domain.models import Lion
from core.interfaces.repository import AnimalRepository
from core.services.zoo_service import ZooService


def test_both_repositories_satisfy_the_contract(data_file):
    assert isinstance(JsonAnimalRepository(data_file), AnimalRepository)
    assert isinstance(InMemoryAnimalRepository(), AnimalRepository)


def test_missing_file_loads_empty(data_file):
    repo = JsonAnimalRepository(data_file)
    assert repo.load() == []
    assert not data_file.exists()


def test_save_then_load(data_file, residents):
    repo = JsonAnimalRepository(data_file)
    repo.save(residents)

    assert data_file.exists()
    assert len(json.loads(data_file.read_text(encoding="utf-8"))) == 3
    assert JsonAnimalRepository(str(data_file)).load() == residents


def test_save_overwrites_previous_content(data_file, residents):
    repo = JsonAnimalRepository(data_file)
    repo.save(residents)
    repo.save(residents[:1])

    assert repo.load() == residents[:1]


def test_load_returns_a_fresh_list(data_file, residents):
    repo = JsonAnimalRepository(data_file)
    repo.save(residents)

    first = repo.load()
    first.append(Lion(name="Extra", age=1, is_alpha=False))
    assert repo.load() == residents


def test_malformed_file_raises_format_error(data_file):
    data_file.parent.mkdir(parents=True)
    data_file.write_text('[{"$type": "unicorn"}]', encoding="utf-8")

    with pytest.raises(FormatError):
        JsonAnimalRepository(data_file).load()


def test_filesystem_errors_propagate_unchanged(tmp_path, residents):
    directory = tmp_path / "a-directory"
    directory.mkdir()

    with pytest.raises(OSError):
        JsonAnimalRepository(directory).load()
    with pytest.raises(OSError):
        JsonAnimalRepository(directory).save(residents)


def test_memory_repository_keeps_a_snapshot(residents):
    repo = InMemoryAnimalRepository()
    animals = list(residents)
    repo.save(animals)
    animals.clear()

    assert repo.load() == residents
    assert repo.save_count == 1


def test_undecodable_bytes_raise_format_error(data_file, residents):
    data_file.parent.mkdir(parents=True)
    data_file.write_bytes(b'[{"$type": "lion", "Name": "\xff\xfe", "Age": 5, "IsAlpha": true}]')

    with pytest.raises(FormatError, match="UTF-8"):
        JsonAnimalRepository(data_file).load()

    zoo = ZooService(JsonAnimalRepository(data_file), seed=residents)
    with pytest.raises(FormatError):
        zoo.load()
    assert zoo.list_animals() == tuple(residents)
