import logging

import pytest

from gaze_dashboard.acquisition import DummySource, FileSource, MemorySource, TextSource
from gaze_dashboard.configs import AppSettings
from gaze_dashboard.factories import create_source
from gaze_dashboard.pipeline import decode_records, ChunkedTransformer


@pytest.mark.asyncio
async def test_file_source_reports_block_progress(tmp_path):
    path = tmp_path / "gaze.csv"
    path.write_bytes(b"a" * 1000)
    progress = []

    text = await FileSource(path, block_size=300).read(progress.append)

    assert text == "a" * 1000
    assert progress == [30, 60, 90, 100, 100]


@pytest.mark.asyncio
async def test_file_source_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_bytes(b"")
    progress = []
    assert await FileSource(path).read(progress.append) == ""
    assert progress == [100]


@pytest.mark.asyncio
async def test_file_source_drops_bom_and_replaces_bad_bytes(tmp_path):
    path = tmp_path / "gaze.csv"
    path.write_bytes(b"\xef\xbb\xbftimestamp,x,y\n1,2,\xff")
    text = await FileSource(path).read()
    assert text == "timestamp,x,y\n1,2,\ufffd"


@pytest.mark.asyncio
async def test_file_source_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        await FileSource(tmp_path / "missing.csv").read()


def test_file_source_warns_on_other_suffix(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        source = FileSource(tmp_path / "gaze.txt")
    assert source.name == "gaze.txt"
    assert "does not have a .csv suffix" in caplog.text


def test_file_source_rejects_bad_block_size(tmp_path):
    with pytest.raises(ValueError):
        FileSource(tmp_path / "gaze.csv", block_size=0)


@pytest.mark.asyncio
async def test_memory_source():
    progress = []
    source = MemorySource("a,b", name="inline")
    assert isinstance(source, TextSource)
    assert await source.read(progress.append) == "a,b"
    assert progress == [100]
    assert source.name == "inline"


@pytest.mark.asyncio
async def test_dummy_source_rows_and_invalid_rows():
    source = DummySource(200, invalid_every=50)
    records = decode_records(await source.read())

    assert len(records) == 200
    assert list(records[0]) == DummySource.HEADER
    acc = await ChunkedTransformer().transform(records)
    assert acc.rows_rejected == 4
    assert len(acc.samples) == 196
    assert {s.aoi_name for s in acc.samples} == set(DummySource.AOI_NAMES)


@pytest.mark.asyncio
async def test_dummy_source_without_invalid_rows():
    records = decode_records(await DummySource(60, invalid_every=0).read())
    acc = await ChunkedTransformer().transform(records)
    assert acc.rows_rejected == 0
    assert acc.samples[1].timestamp == 8


def test_factory_creates_file_source(tmp_path):
    settings = AppSettings(_env_file=None)
    source = create_source(settings, tmp_path / "gaze.csv")
    assert isinstance(source, FileSource)
    assert source.block_size == settings.ingestion.read_block_size
    assert source.encoding == settings.ingestion.encoding


def test_factory_creates_dummy_source():
    settings = AppSettings(_env_file=None)
    settings.dummy.num_samples = 10
    source = create_source(settings, dummy=True)
    assert isinstance(source, DummySource)
    assert source.num_samples == 10


def test_factory_requires_path():
    with pytest.raises(ValueError):
        create_source(AppSettings(_env_file=None))
