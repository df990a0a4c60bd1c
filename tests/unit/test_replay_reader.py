"""
Unit tests for slpsort.parsing.replay_reader module.

The peppi-py decoder is replaced with a mock so no real replays are needed.
"""

import pytest
from pathlib import Path
from unittest.mock import Mock, patch

from slpsort.parsing.replay_reader import ReplayReader, ReadResult


@pytest.mark.unit
class TestReplayReader:
    """Test reading replays through the decoder."""

    def test_successful_read(self, tournament_game):
        decoder = Mock(return_value=tournament_game)
        reader = ReplayReader(decoder=decoder)

        result = reader.read_file('./Game_1.slp')

        assert result == ReadResult(success=True, replay_path=Path('Game_1.slp'), game=tournament_game)
        decoder.assert_called_once_with('Game_1.slp')

    def test_decode_error_is_returned_not_raised(self):
        reader = ReplayReader(decoder=Mock(side_effect=OSError("unexpected event payload")))

        result = reader.read_file('corrupt.slp')

        assert not result.success
        assert result.game is None
        assert result.error == "unexpected event payload"

    def test_error_without_message_uses_exception_name(self):
        reader = ReplayReader(decoder=Mock(side_effect=EOFError()))

        result = reader.read_file('truncated.slp')

        assert result.error == 'EOFError'

    def test_decoder_returning_none_fails(self):
        reader = ReplayReader(decoder=Mock(return_value=None))

        result = reader.read_file('empty.slp')

        assert not result.success
        assert result.error == "Decoder returned no game"

    def test_defaults_to_peppi(self):
        with patch('slpsort.parsing.replay_reader.read_slippi') as mock_read:
            reader = ReplayReader()

        assert reader.decoder is mock_read
