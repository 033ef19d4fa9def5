"""Slackリッチテキスト(blocks)の型定義とデコード"""

from collections.abc import Mapping
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, Field, StrictBool, ValidationError, ValidationInfo, field_validator, model_validator

from slack_export_digester.richtext.exceptions import RichTextDecodeError, UnrecognizedStyleShapeError

RICH_TEXT_BLOCK = "rich_text"

# 要素のtypeタグ（Slackエクスポートの値）
TEXT = "text"
EMOJI = "emoji"
USER = "user"
CHANNEL = "channel"
LINK = "link"
SECTION = "rich_text_section"
LIST = "rich_text_list"
QUOTE = "rich_text_quote"
PREFORMATTED = "rich_text_preformatted"

ListKind = Literal["ordered", "unordered"]


class ListStyle(BaseModel, frozen=True):
    """リスト要素のstyle（文字列形式）"""

    is_list: ClassVar[bool] = True

    kind: ListKind


class TextStyle(BaseModel, frozen=True):
    """テキスト要素のstyle（真偽値フラグのオブジェクト形式）"""

    is_list: ClassVar[bool] = False

    bold: StrictBool = False
    italic: StrictBool = False
    strike: StrictBool = False
    code: StrictBool = False


Style = ListStyle | TextStyle


def decode_style(raw: Any) -> Style:
    """styleの生の値をListStyleかTextStyleに判別してデコードする。

    文字列形式を先に試し、次にオブジェクト形式を試す。
    "ordered"以外の文字列（Slackの"bullet"など）は箇条書きとして扱う。

    Args:
        raw: JSONからデコードされたstyleの値

    Returns:
        判別済みのStyle

    Raises:
        UnrecognizedStyleShapeError: どちらの形にも一致しない場合
    """
    if isinstance(raw, str):
        return ListStyle(kind="ordered" if raw == "ordered" else "unordered")

    if isinstance(raw, Mapping):
        try:
            return TextStyle.model_validate(raw)
        except ValidationError as e:
            raise UnrecognizedStyleShapeError(raw) from e

    raise UnrecognizedStyleShapeError(raw)


class Element(BaseModel, frozen=True):
    """リッチテキストツリーのノード（葉またはコンテナ）"""

    type: str
    text: str = ""
    style: Style = Field(default_factory=TextStyle)
    name: str = ""  # emoji名
    user_id: str = ""
    channel_id: str = ""
    url: str = ""
    elements: list["Element"] = Field(default_factory=list)
    indent: int = Field(default=0, ge=0)
    border: int = Field(default=0, ge=0)

    @field_validator("style", mode="before")
    @classmethod
    def _decode_style(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            # nullのstyleはリスト要素なら箇条書き、それ以外はフラグなし
            return ListStyle(kind="unordered") if info.data.get("type") == LIST else TextStyle()
        if isinstance(value, ListStyle | TextStyle):
            return value
        return decode_style(value)


class Block(BaseModel, frozen=True):
    """メッセージのトップレベルのブロック"""

    type: str
    elements: list[Element] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _drop_foreign_elements(cls, data: Any) -> Any:
        # rich_text以外のブロック（section, actions等）の要素は構造が異なるためデコードしない
        if isinstance(data, Mapping) and data.get("type") != RICH_TEXT_BLOCK:
            return {"type": data.get("type", ""), "elements": []}
        return data


def decode_blocks(raw: list[Any]) -> list[Block]:
    """メッセージのblocks配列を型付きツリーにデコードする

    Args:
        raw: JSONからデコードされたblocks配列

    Returns:
        Blockのリスト

    Raises:
        UnrecognizedStyleShapeError: styleの形が不正な場合
        RichTextDecodeError: その他の構造的な不整合がある場合
    """
    if not isinstance(raw, list):
        msg = f"Blocks must be a list, got {type(raw).__name__}"
        raise RichTextDecodeError(msg)

    try:
        return [Block.model_validate(block) for block in raw]
    except ValidationError as e:
        for error in e.errors():
            cause = error.get("ctx", {}).get("error")
            if isinstance(cause, UnrecognizedStyleShapeError):
                raise cause from e
        msg = f"Invalid rich text blocks: {e}"
        raise RichTextDecodeError(msg) from e
