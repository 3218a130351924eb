"""DumpUsersUseCase for printing and encoding the remote user collection."""

import logging
from typing import TextIO

from userfeed.domain.repositories.user_repository import UserRepository
from userfeed.domain.services.generic_encoder import encode_users
from userfeed.domain.services.user_formatter import format_users

logger = logging.getLogger(__name__)


class DumpUsersUseCase:
    """Dump users use case.

    Fetches every user, prints a human-readable block per user and then the
    whole collection as an indented JSON document.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        output: TextIO,
        indent: int = 2,
    ) -> None:
        """Initialize DumpUsersUseCase.

        Args:
            user_repository: Repository the users are fetched from.
            output: Stream the results are written to.
            indent: Indentation of the JSON document.
        """
        self._user_repository = user_repository
        self._output = output
        self._indent = indent

    def execute(self) -> None:
        """Fetch, print and encode users.

        Nothing is written if fetching fails; the error propagates.
        """
        users = self._user_repository.get_users()

        self._output.write("\n")
        self._output.write(format_users(users))
        self._output.write(encode_users(users, indent=self._indent))
        self._output.write("\n")
        self._output.flush()

        logger.debug("Dumped %d users", len(users))
