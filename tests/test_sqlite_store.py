from __future__ import annotations

import asyncio
from pathlib import Path

from pc_builder.configuration import ConfigurationStore
from pc_builder.persistence.sqlite import create_sqlite_key_value_store
from pc_builder.submission import SubmissionPipeline


def _db_url(tmp_path: Path) -> str:
    db_file = tmp_path / "pc_builder.db"
    return f"sqlite+aiosqlite:///{db_file}"


def test_sqlite_write_read_and_overwrite(tmp_path: Path) -> None:
    kv = create_sqlite_key_value_store(_db_url(tmp_path))

    assert asyncio.run(kv.read("computerConfig")) is None

    asyncio.run(kv.write("computerConfig", '{"v": 1}'))
    assert asyncio.run(kv.read("computerConfig")) == '{"v": 1}'

    asyncio.run(kv.write("computerConfig", '{"v": 2}'))
    assert asyncio.run(kv.read("computerConfig")) == '{"v": 2}'
    assert asyncio.run(kv.read("other")) is None

    asyncio.run(kv.dispose())


def test_sqlite_pipeline_round_trip_across_stores(tmp_path: Path) -> None:
    url = _db_url(tmp_path)
    store = ConfigurationStore()
    store.set_base_model("Tower-X")
    index = store.append_component()
    store.update_component_field(index, "type", "storage")
    store.update_component_field(index, "name", "NVMe")
    store.update_component_field(index, "price", 120.5)
    store.update_component_field(index, "capacity", "1000")
    store.update_component_field(index, "storageType", "ssd")

    pipeline = SubmissionPipeline(create_sqlite_key_value_store(url))
    snapshot = pipeline.submit(store.configuration)
    asyncio.run(pipeline.save())

    reader = SubmissionPipeline(create_sqlite_key_value_store(url))
    loaded = asyncio.run(reader.load())
    assert loaded == snapshot
    assert loaded is not None
    assert loaded.total_price == 120.5


def test_in_memory_database_url_keeps_its_table() -> None:
    async def scenario() -> tuple[str | None, str | None]:
        first = create_sqlite_key_value_store("sqlite+aiosqlite:///:memory:")
        second = create_sqlite_key_value_store("sqlite+aiosqlite:///:memory:")
        try:
            await first.write("computerConfig", '{"v": 1}')
            return await first.read("computerConfig"), await second.read("computerConfig")
        finally:
            await first.dispose()
            await second.dispose()

    assert asyncio.run(scenario()) == ('{"v": 1}', None)


def test_each_store_migrates_its_own_database(tmp_path: Path) -> None:
    first = create_sqlite_key_value_store(f"sqlite+aiosqlite:///{tmp_path / 'a.db'}")
    asyncio.run(first.write("computerConfig", '{"v": 1}'))
    asyncio.run(first.dispose())

    second = create_sqlite_key_value_store(f"sqlite+aiosqlite:///{tmp_path / 'b.db'}")
    asyncio.run(second.write("computerConfig", '{"v": 2}'))
    assert asyncio.run(second.read("computerConfig")) == '{"v": 2}'
    asyncio.run(second.dispose())
