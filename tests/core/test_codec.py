"""Tests for MessageCodec and outbound messages."""

import json

import pytest

from stepsync_core.errors import InvalidCommand, MalformedFrame, UnknownCommandType
from stepsync_core.protocol import (
    ClearPatternCommand,
    MessageCodec,
    StepUpdateCommand,
    ToggleStepCommand,
    TransportControlCommand,
    UpdateParamsCommand,
    params_update,
    pattern_update,
    state_update,
    step_position,
    transport_update,
)


@pytest.fixture
def codec() -> MessageCodec:
    return MessageCodec()


class TestDecode:
    """Inbound frames."""

    def test_toggle_step(self, codec: MessageCodec) -> None:
        command = codec.decode('{"type": "toggle_step", "track": "kick", "step": 3}')
        assert isinstance(command, ToggleStepCommand)
        assert command.track == "kick"
        assert command.step == 3

    def test_update_params(self, codec: MessageCodec) -> None:
        frame = json.dumps({"type": "update_params", "track": "arp", "params": {"volume": 0.5, "waveform": "sine"}})
        command = codec.decode(frame)
        assert isinstance(command, UpdateParamsCommand)
        assert command.params == {"volume": 0.5, "waveform": "sine"}

    def test_transport_play(self, codec: MessageCodec) -> None:
        command = codec.decode('{"type": "transport_control", "action": "play"}')
        assert isinstance(command, TransportControlCommand)
        assert command.action == "play"
        assert command.bpm is None

    def test_transport_set_bpm(self, codec: MessageCodec) -> None:
        command = codec.decode('{"type": "transport_control", "action": "set_bpm", "bpm": 128}')
        assert command.bpm == 128

    def test_step_update(self, codec: MessageCodec) -> None:
        command = codec.decode('{"type": "step_update", "step": 12}')
        assert isinstance(command, StepUpdateCommand)
        assert command.step == 12

    def test_clear_pattern(self, codec: MessageCodec) -> None:
        assert isinstance(codec.decode('{"type": "clear_pattern"}'), ClearPatternCommand)

    def test_extra_fields_ignored(self, codec: MessageCodec) -> None:
        command = codec.decode('{"type": "clear_pattern", "from": "companion"}')
        assert isinstance(command, ClearPatternCommand)

    def test_bytes_frame(self, codec: MessageCodec) -> None:
        command = codec.decode(b'{"type": "step_update", "step": 1}')
        assert command.step == 1


class TestDecodeErrors:
    """Frames that do not become commands."""

    @pytest.mark.parametrize(
        "frame",
        ["not json", "{", "", b"\xff\xfe", '{"type": "transport_control", "action": "set_bpm", "bpm": NaN}'],
    )
    def test_malformed(self, codec: MessageCodec, frame: str | bytes) -> None:
        with pytest.raises(MalformedFrame):
            codec.decode(frame)

    @pytest.mark.parametrize("frame", ["[1, 2]", "42", '"toggle_step"', "null"])
    def test_non_object_is_malformed(self, codec: MessageCodec, frame: str) -> None:
        with pytest.raises(MalformedFrame):
            codec.decode(frame)

    def test_oversize_frame(self) -> None:
        codec = MessageCodec(max_frame_bytes=32)
        frame = json.dumps({"type": "update_params", "track": "kick", "params": {"x" * 40: 1}})
        with pytest.raises(MalformedFrame):
            codec.decode(frame)

    @pytest.mark.parametrize("frame", ['{"type": "dance"}', '{"track": "kick"}', '{"type": 5}'])
    def test_unknown_type(self, codec: MessageCodec, frame: str) -> None:
        with pytest.raises(UnknownCommandType):
            codec.decode(frame)

    @pytest.mark.parametrize(
        "payload",
        [
            {"type": "toggle_step", "track": "kick"},
            {"type": "toggle_step", "track": "kick", "step": "three"},
            {"type": "update_params", "track": "kick", "params": "loud"},
            {"type": "update_params", "track": "kick", "params": {"volume": [1]}},
            {"type": "transport_control", "action": "rewind"},
            {"type": "transport_control", "action": "set_bpm", "bpm": "fast"},
            {"type": "step_update", "step": -1},
            {"type": "step_update"},
            {"type": "toggle_step", "track": "kick", "step": True},
            {"type": "toggle_step", "track": "kick", "step": "3"},
            {"type": "toggle_step", "track": "kick", "step": 3.0},
            {"type": "update_params", "track": "kick", "params": {"volume": True}},
            {"type": "update_params", "track": "kick", "params": {"mute": False}},
            {"type": "transport_control", "action": "set_bpm", "bpm": "100"},
            {"type": "transport_control", "action": "set_bpm", "bpm": True},
            {"type": "step_update", "step": True},
        ],
    )
    def test_invalid_fields(self, codec: MessageCodec, payload: dict) -> None:
        with pytest.raises(InvalidCommand) as exc_info:
            codec.decode(json.dumps(payload))
        assert exc_info.value.command_type == payload["type"]


class TestOutbound:
    """Outbound envelopes."""

    def test_pattern_update(self, codec: MessageCodec) -> None:
        frame = codec.encode(pattern_update("kick", 3, True))
        assert json.loads(frame) == {
            "type": "pattern_update",
            "data": {"track": "kick", "step": 3, "active": True},
        }

    def test_params_update(self) -> None:
        message = params_update("bass", {"volume": 0.4})
        assert message.to_dict() == {"type": "params_update", "data": {"track": "bass", "params": {"volume": 0.4}}}

    def test_transport_update_picks_fields(self) -> None:
        message = transport_update({"playing": True, "current_step": 0, "bpm": 120, "extra": 1})
        assert message.data == {"playing": True, "current_step": 0, "bpm": 120}

    def test_step_position(self) -> None:
        assert step_position(4).to_dict() == {"type": "step_position", "data": {"current_step": 4}}

    def test_state_update(self) -> None:
        snapshot = {"bpm": 120, "playing": False, "current_step": 0, "tracks": {}}
        assert json.loads(state_update(snapshot).to_frame()) == {"type": "state_update", "data": snapshot}
