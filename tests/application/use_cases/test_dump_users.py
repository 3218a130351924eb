"""Tests for DumpUsersUseCase."""

import io
import json
from unittest.mock import MagicMock

import pytest

from userfeed.application.use_cases.dump_users import DumpUsersUseCase
from userfeed.domain.entities import User
from userfeed.infrastructure.http.exceptions import ProtocolError, TransportError


@pytest.fixture
def mock_user_repository() -> MagicMock:
    """Create mock UserRepository."""
    repository = MagicMock()
    repository.get_users.return_value = []
    return repository


class TestDumpUsersUseCase:
    """DumpUsersUseCase tests."""

    def test_minimal_user_output(
        self, mock_user_repository: MagicMock, minimal_user: User
    ) -> None:
        """Test console lines followed by the encoded document."""
        mock_user_repository.get_users.return_value = [minimal_user]
        output = io.StringIO()

        DumpUsersUseCase(mock_user_repository, output).execute()

        text = output.getvalue()
        assert text.startswith("\nA (a)\na@x.com\n\n")
        encoded = text[len("\nA (a)\na@x.com\n\n") :]
        assert encoded.endswith("\n")
        assert json.loads(encoded) == [
            {
                "name": "A",
                "username": "a",
                "email": "a@x.com",
                "address": None,
                "company": None,
            }
        ]

    def test_full_user_output(
        self, mock_user_repository: MagicMock, leanne: User
    ) -> None:
        """Test that optional records are printed and encoded."""
        mock_user_repository.get_users.return_value = [leanne]
        output = io.StringIO()

        DumpUsersUseCase(mock_user_repository, output).execute()

        text = output.getvalue()
        assert "Kulas Light, Apt. 556, Gwenborough 92998-3874\n" in text
        assert "-37.3159, 81.1496\n" in text
        assert 'Romaguera-Crona ("Multi-layered client-server neural-net")\n' in text
        assert '"catchPhrase": "Multi-layered client-server neural-net"' in text

    def test_indent(self, mock_user_repository: MagicMock, minimal_user: User) -> None:
        """Test that the configured indent is used."""
        mock_user_repository.get_users.return_value = [minimal_user]
        output = io.StringIO()

        DumpUsersUseCase(mock_user_repository, output, indent=4).execute()

        assert '\n        "name": "A"' in output.getvalue()

    def test_fetches_once(self, mock_user_repository: MagicMock) -> None:
        """Test that the repository is called exactly once."""
        DumpUsersUseCase(mock_user_repository, io.StringIO()).execute()

        mock_user_repository.get_users.assert_called_once_with()

    def test_empty_collection(self, mock_user_repository: MagicMock) -> None:
        """Test output for no users."""
        output = io.StringIO()

        DumpUsersUseCase(mock_user_repository, output).execute()

        assert output.getvalue() == "\n[]\n"

    @pytest.mark.parametrize(
        "error",
        [ProtocolError("HTTP 500", 500), TransportError("Connection refused")],
    )
    def test_error_prints_nothing(
        self, mock_user_repository: MagicMock, error: Exception
    ) -> None:
        """Test that a failed fetch propagates before any output."""
        mock_user_repository.get_users.side_effect = error
        output = io.StringIO()

        with pytest.raises(type(error)):
            DumpUsersUseCase(mock_user_repository, output).execute()

        assert output.getvalue() == ""
