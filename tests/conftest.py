import os

import pytest

from gaze_dashboard.configs import AppSettings, IngestionSettings


def make_export(rows, header=("timestamp", "x", "y", "fixationDuration", "aoiName")):
    """Builds export text from a header and rows of field values."""
    lines = [",".join(header)]
    lines.extend(",".join(str(v) for v in row) for row in rows)
    return "\n".join(lines)


class RecordingView:
    """IngestionView that keeps every event for assertions."""

    def __init__(self):
        self.read_progress = []
        self.transform_progress = []
        self.results = []
        self.errors = []

    def show_read_progress(self, percent):
        self.read_progress.append(percent)

    def show_transform_progress(self, percent):
        self.transform_progress.append(percent)

    def show_results(self, metrics):
        self.results.append(metrics)

    def show_error(self, message):
        self.errors.append(message)


@pytest.fixture
def settings(monkeypatch):
    for key in list(os.environ):
        if key.upper().startswith("GAZE_DASH__"):
            monkeypatch.delenv(key)
    return AppSettings(_env_file=None)


@pytest.fixture
def small_chunk_settings(settings):
    settings.ingestion = IngestionSettings(chunk_size=10)
    return settings


@pytest.fixture
def view():
    return RecordingView()
