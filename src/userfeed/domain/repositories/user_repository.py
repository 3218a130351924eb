"""User repository protocol."""

from typing import Protocol

from userfeed.domain.entities import User


class UserRepository(Protocol):
    """ユーザー情報リポジトリの抽象インターフェース

    ユーザー一覧の取得を抽象化し、
    通信層の実装詳細を隠蔽する。
    """

    def get_users(self) -> list[User]:
        """全ユーザーを取得する

        Returns:
            リモートのコレクション順に並んだユーザーのリスト
        """
        ...
