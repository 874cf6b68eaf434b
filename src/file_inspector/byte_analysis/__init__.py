"""Analiza surowych danych binarnych: ciągi znaków, serie bajtów, sygnatury."""

from .classifier import (
	UNKNOWN_FORMAT,
	HiddenData,
	MediaMetadata,
	MediaReport,
	analyze_media,
	count_sequences,
	detect_format,
	extract_strings,
	find_repeating_bytes,
	search_for_hidden_data,
)
from .signature_loader import (
	FormatSignature,
	SignatureConfigError,
	audio_signatures,
	image_signatures,
	load_default_signatures,
	load_signatures,
)

__all__ = [
	"UNKNOWN_FORMAT",
	"HiddenData",
	"MediaMetadata",
	"MediaReport",
	"analyze_media",
	"count_sequences",
	"detect_format",
	"extract_strings",
	"find_repeating_bytes",
	"search_for_hidden_data",
	"FormatSignature",
	"SignatureConfigError",
	"audio_signatures",
	"image_signatures",
	"load_default_signatures",
	"load_signatures",
]
