from spectral_drift.voice import VoiceOutputConfig, VoiceOutputService


class StubSynthesizer:
    def __init__(self) -> None:
        self.texts: list[str] = []

    def synthesize(self, text: str) -> bytes:
        self.texts.append(text)
        return text.encode("utf-8")


class StubDevice:
    def __init__(self) -> None:
        self.played: list[bytes] = []

    def play(self, audio_bytes: bytes) -> None:
        self.played.append(audio_bytes)


def test_speak_normalizes_and_truncates_whisper() -> None:
    synthesizer, device = StubSynthesizer(), StubDevice()
    service = VoiceOutputService(synthesizer, device, VoiceOutputConfig(max_chars=12))

    audio = service.speak("  The   quarry\nremembers  everything ")

    assert synthesizer.texts == ["The quarry r"]
    assert device.played == [audio]


def test_speak_is_silent_when_disabled_or_blank() -> None:
    synthesizer, device = StubSynthesizer(), StubDevice()

    assert VoiceOutputService(synthesizer, device, VoiceOutputConfig(enabled=False)).speak("hush") is None
    assert VoiceOutputService(synthesizer, device).speak("   ") is None
    assert device.played == []
