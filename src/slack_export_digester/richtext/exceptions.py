"""リッチテキストのデコード・レンダリングに関する例外"""

from typing import Any


class RichTextError(Exception):
    """リッチテキスト関連のエラーの基底クラス"""


class RichTextDecodeError(RichTextError, ValueError):
    """blocks配列を型付きツリーにデコードできなかった場合のエラー"""


class UnrecognizedStyleShapeError(RichTextDecodeError):
    """styleが文字列・オブジェクトのどちらの形にも一致しない場合のエラー"""

    def __init__(self, raw: Any) -> None:
        """初期化

        Args:
            raw: デコードに失敗したstyleの生の値
        """
        super().__init__(f"Unrecognized style shape: {raw!r}")
        self.raw = raw


class RenderDepthExceededError(RichTextError):
    """要素のネストが許容する深さを超えた場合のエラー"""

    def __init__(self, max_depth: int) -> None:
        """初期化

        Args:
            max_depth: 許容されるネストの深さ
        """
        super().__init__(f"Rich text nesting exceeds max depth: {max_depth}")
        self.max_depth = max_depth
