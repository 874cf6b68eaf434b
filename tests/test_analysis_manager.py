"""Testy orkiestratora analizy plików."""

from __future__ import annotations

import asyncio
import json

import pytest

from file_inspector.core import AnalysisKind, AnalysisManager, analyze
from file_inspector.crypto_detection import encrypt
from file_inspector.reporting import ExportFormat
from file_inspector.shared import AppConfig
from file_inspector.sources import MemoryFileSource

from tests.synthetic_data import (
    MP3_HEADER,
    PNG_HEADER,
    FailingFileSource,
    png_file,
    text_file,
    undecodable_file,
)


def test_png_image_is_classified(manager: AnalysisManager) -> None:
    source = png_file(payload=b"\x00\x00\x00\rIHDR\x00")

    result = asyncio.run(manager.analyze(source))

    assert result.file_name == "test.png"
    assert result.kind is AnalysisKind.IMAGE
    assert result.data["metadata"]["possibleFormat"] == "PNG"
    assert result.data["metadata"]["header"] == PNG_HEADER.hex()
    assert result.data["size"] == source.size
    assert result.data["type"] == "image/png"
    assert result.data["hiddenData"]["strings"] == ("IHDR",)


def test_audio_uses_audio_signatures(manager: AnalysisManager) -> None:
    content = MP3_HEADER + b"\x00" * 10 + b"TITLE track\x00"
    source = MemoryFileSource(name="song.mp3", media_type="audio/mpeg", content=content)

    result = asyncio.run(manager.analyze(source))

    assert result.kind is AnalysisKind.AUDIO
    assert result.data["metadata"]["possibleFormat"] == "MP3"
    assert result.to_dict()["data"]["hiddenData"] == {
        "strings": ["TITLE track"],
        "patterns": {"nullSequences": 1, "repeatingBytes": {0: 10}},
    }


def test_image_with_unknown_header(manager: AnalysisManager) -> None:
    source = MemoryFileSource(name="weird.png", media_type="image/png", content=b"")

    result = asyncio.run(manager.analyze(source))

    assert result.kind is AnalysisKind.IMAGE
    assert result.data["metadata"] == {"header": "", "possibleFormat": "Unknown"}
    assert result.data["hiddenData"]["patterns"]["repeatingBytes"] == {}


def test_plain_text_is_analysed(manager: AnalysisManager) -> None:
    content = "contact me at a@b.com or http://x.com"

    result = asyncio.run(manager.analyze(text_file("notes.txt", content)))

    assert result.kind is AnalysisKind.TEXT
    assert result.data["length"] == len(content)
    assert result.data["lines"] == 1
    assert result.data["patterns"]["emails"] == ("a@b.com",)
    assert result.data["patterns"]["urls"] == ("http://x.com",)
    assert result.data["possibleEncodings"] == ()


def test_unknown_media_type_falls_back_to_text(manager: AnalysisManager) -> None:
    source = MemoryFileSource(name="blob", media_type="", content=b"just words\nand more")

    result = asyncio.run(manager.analyze(source))

    assert result.kind is AnalysisKind.TEXT
    assert result.data["lines"] == 2


def test_encrypted_text_is_decrypted_with_dictionary(manager: AnalysisManager) -> None:
    envelope = encrypt("meet at noon", "secret", salt=b"abcdefgh")

    result = asyncio.run(manager.analyze(text_file("cipher.txt", envelope)))

    assert result.kind is AnalysisKind.ENCRYPTED
    assert result.to_dict()["data"] == {"possibleDecryptions": {"secret": "meet at noon"}, "originalLength": len(envelope)}


def test_candidate_keys_come_from_config() -> None:
    envelope = encrypt("configured", "letmein", salt=b"abcdefgh")
    manager = AnalysisManager(config=AppConfig(candidate_keys=("letmein",)))

    result = asyncio.run(manager.analyze(text_file("cipher.txt", envelope)))

    assert result.data["possibleDecryptions"] == {"letmein": "configured"}


def test_decode_failure_becomes_error_result(manager: AnalysisManager) -> None:
    result = asyncio.run(manager.analyze(undecodable_file()))

    assert result.is_error
    assert isinstance(result.data, str)
    assert result.data.startswith("Analysis failed: ")
    assert "broken.txt" in result.data


def test_unexpected_exception_is_captured(manager: AnalysisManager) -> None:
    source = FailingFileSource(error=RuntimeError("disk on fire"))

    result = asyncio.run(manager.analyze(source))

    assert result.kind is AnalysisKind.ERROR
    assert result.data == "Analysis failed: disk on fire"


def test_batch_preserves_order_and_isolates_failures(manager: AnalysisManager, reporter) -> None:
    sources = [
        png_file("first.png"),
        undecodable_file("second.txt"),
        text_file("third.txt", "see 192.168.0.1"),
    ]

    results = asyncio.run(manager.analyze_batch(sources))

    assert [result.file_name for result in results] == ["first.png", "second.txt", "third.txt"]
    assert results[0].kind is AnalysisKind.IMAGE
    assert results[1].kind is AnalysisKind.ERROR
    assert results[2].kind is AnalysisKind.TEXT
    assert results[2].data["patterns"]["ipAddresses"] == ("192.168.0.1",)

    percentages = [percentage for _message, percentage in reporter.updates]
    assert len(percentages) == 3
    assert max(percentages) == 100


def test_batch_with_single_worker() -> None:
    manager = AnalysisManager(config=AppConfig(max_concurrency=1))
    sources = [text_file(f"file{index}.txt", f"line {index}") for index in range(5)]

    results = asyncio.run(manager.analyze_batch(sources))

    assert [result.file_name for result in results] == [f"file{index}.txt" for index in range(5)]


def test_empty_batch(manager: AnalysisManager) -> None:
    assert asyncio.run(manager.analyze_batch([])) == []


def test_custom_signature_file(tmp_path) -> None:
    path = tmp_path / "signatures.json"
    path.write_text(json.dumps({"image": [{"prefix": "424d", "name": "BMP"}]}), encoding="utf-8")
    manager = AnalysisManager(config=AppConfig(signatures_path=path))

    bmp = asyncio.run(manager.analyze(MemoryFileSource("a.bmp", "image/bmp", b"BM\x00\x00")))
    mp3 = asyncio.run(manager.analyze(MemoryFileSource("a.mp3", "audio/mpeg", MP3_HEADER)))

    assert bmp.data["metadata"]["possibleFormat"] == "BMP"
    assert mp3.data["metadata"]["possibleFormat"] == "MP3"


def test_module_level_analyze() -> None:
    result = asyncio.run(analyze(png_file()))
    assert result.kind is AnalysisKind.IMAGE


def test_export_report(manager: AnalysisManager, reporter, tmp_path) -> None:
    results = asyncio.run(manager.analyze_batch([png_file()]))

    path = manager.export_report(results, tmp_path / "out" / "report.json", ExportFormat.JSON)

    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload[0]["fileName"] == "test.png"
    assert reporter.updates[-1] == ("Raport został zapisany", 100)


def test_export_report_requires_exporter(tmp_path) -> None:
    manager = AnalysisManager()

    with pytest.raises(RuntimeError):
        manager.export_report([], tmp_path / "report.json", ExportFormat.JSON)


def test_finished_result_cannot_be_modified(manager: AnalysisManager) -> None:
    result = asyncio.run(manager.analyze(png_file()))

    with pytest.raises(TypeError):
        result.data["metadata"]["possibleFormat"] = "GIF"  # type: ignore[index]

    assert result.data["metadata"]["possibleFormat"] == "PNG"


def test_surrogate_key_from_env_does_not_break_decryption(monkeypatch) -> None:
    monkeypatch.setenv("FILEINSPECTOR_KEYS", "secret,\udcff")
    envelope = encrypt("hello", "secret", salt=b"abcdefgh")
    manager = AnalysisManager(config=AppConfig.from_env())

    result = asyncio.run(manager.analyze(text_file("cipher.txt", envelope)))

    assert result.kind is AnalysisKind.ENCRYPTED
    assert result.to_dict()["data"]["possibleDecryptions"] == {"secret": "hello"}


class _BrokenReporter:
    def update(self, message: str, *, percentage: int | None = None) -> None:
        raise RuntimeError("reporter down")


def test_failing_progress_reporter_does_not_abort_batch() -> None:
    manager = AnalysisManager(progress_reporter=_BrokenReporter())
    sources = [png_file("a.png"), text_file("b.txt", "plain words")]

    results = asyncio.run(manager.analyze_batch(sources))

    assert [result.kind for result in results] == [AnalysisKind.IMAGE, AnalysisKind.TEXT]
