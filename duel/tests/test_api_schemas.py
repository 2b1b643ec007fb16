"""
Tests for the wire schemas.
"""

import pytest

from ..api.schemas import ErrorMessage, JoinedMessage, RoomResponse, parse_message
from ..engine_core.action import ActionType
from ..engine_core.errors import ActionValidationError, ErrorCode
from ..engine_core.state import Side
from ..session import RoomStatus


class TestParseMessage:
    """Tests for turning client messages into actions."""

    def test_start_game(self):
        action = parse_message('{"type": "START_GAME"}')

        assert action.action_type is ActionType.START_GAME
        assert action.payload.card_id is None

    def test_card_clicked(self):
        action = parse_message('{"type": "STAGE_CARD_CLICKED", "cardId": "abc"}')

        assert action.action_type is ActionType.STAGE_CARD_CLICKED
        assert action.payload.card_id == "abc"

    def test_card_discarded(self):
        action = parse_message({"type": "STAGE_CARD_DISCARDED", "cardId": "abc"})

        assert action.action_type is ActionType.STAGE_CARD_DISCARDED
        assert action.payload.card_id == "abc"

    def test_snake_case_is_accepted(self):
        action = parse_message({"type": "STAGE_CARD_CLICKED", "card_id": "abc"})

        assert action.payload.card_id == "abc"

    def test_bytes(self):
        action = parse_message(b'{"type": "START_GAME"}')

        assert action.action_type is ActionType.START_GAME

    @pytest.mark.parametrize(
        "raw",
        [
            '{"type": "BUILD_WONDER", "cardId": "abc"}',
            '{"cardId": "abc"}',
            '{"type": "STAGE_CARD_CLICKED"}',
            '{"type": "STAGE_CARD_CLICKED", "cardId": ""}',
            '{"type": "STAGE_CARD_CLICKED", "cardId": 5}',
            '{"type": "START_GAME", "force": true}',
            "not json",
            "[]",
            "",
        ],
    )
    def test_rejected(self, raw):
        """Anything outside the three shapes is not recognized."""
        with pytest.raises(ActionValidationError) as exc:
            parse_message(raw)
        assert exc.value.code is ErrorCode.MESSAGE_NOT_RECOGNIZED

    def test_rejected_dict(self):
        with pytest.raises(ActionValidationError):
            parse_message({"type": "START_GAME", "extra": 1})


class TestOutbound:
    """Tests for server messages."""

    def test_error_message_shape(self):
        error = ErrorMessage(code=ErrorCode.NOT_YOUR_TURN, message="It is not your turn.")

        assert error.model_dump(mode="json") == {
            "kind": "ERROR",
            "code": "NOT_YOUR_TURN",
            "message": "It is not your turn.",
        }

    def test_joined_message_uses_camel_case(self):
        joined = JoinedMessage(room_id="r1", player_id="p1", side=Side.B)

        assert joined.to_message() == {
            "kind": "JOINED",
            "roomId": "r1",
            "playerId": "p1",
            "side": "B",
        }

    def test_room_response(self):
        response = RoomResponse(room_id="r1", status=RoomStatus.AWAITING_PLAYERS)

        data = response.model_dump(mode="json")

        assert data["status"] == "awaiting_players"
        assert data["players"] == []
        assert data["api_version"] == "v1"
