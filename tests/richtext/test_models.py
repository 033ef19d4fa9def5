"""リッチテキストの型定義・デコードのテスト"""

import pytest

from slack_export_digester.richtext.exceptions import RichTextDecodeError, UnrecognizedStyleShapeError
from slack_export_digester.richtext.models import Block, Element, ListStyle, TextStyle, decode_blocks, decode_style


class TestDecodeStyle:
    """decode_style関数のテスト"""

    def test_ordered_string(self) -> None:
        """"ordered" → 番号付きリストのListStyle"""
        style = decode_style("ordered")
        assert style == ListStyle(kind="ordered")
        assert style.is_list is True

    def test_bullet_string_is_unordered(self) -> None:
        """Slackの"bullet"は箇条書きとして扱う"""
        assert decode_style("bullet") == ListStyle(kind="unordered")

    def test_unordered_string(self) -> None:
        """"unordered" → 箇条書きのListStyle"""
        assert decode_style("unordered") == ListStyle(kind="unordered")

    def test_bold_object(self) -> None:
        """{"bold": true} → boldのみ立ったTextStyle"""
        style = decode_style({"bold": True})
        assert style == TextStyle(bold=True)
        assert style.is_list is False

    def test_empty_object(self) -> None:
        """空オブジェクト → フラグなしのTextStyle"""
        assert decode_style({}) == TextStyle()

    def test_unknown_keys_are_ignored(self) -> None:
        """未知のキーは無視される"""
        assert decode_style({"italic": True, "underline": True}) == TextStyle(italic=True)

    def test_is_list_is_a_class_discriminant(self) -> None:
        """is_listはクラス定数で、入力のキーでは上書きされない"""
        assert "is_list" not in ListStyle.model_fields
        assert "is_list" not in TextStyle.model_fields
        style = decode_style({"is_list": True, "bold": True})
        assert style == TextStyle(bold=True)
        assert style.is_list is False

    def test_number_fails(self) -> None:
        """42 → デコード失敗"""
        with pytest.raises(UnrecognizedStyleShapeError) as exc_info:
            decode_style(42)
        assert exc_info.value.raw == 42

    def test_list_fails(self) -> None:
        """配列 → デコード失敗"""
        with pytest.raises(UnrecognizedStyleShapeError):
            decode_style(["bold"])

    def test_non_boolean_flag_fails(self) -> None:
        """フラグが真偽値でないオブジェクト → デコード失敗"""
        with pytest.raises(UnrecognizedStyleShapeError):
            decode_style({"bold": "yes"})

    def test_decode_error_is_rich_text_decode_error(self) -> None:
        """UnrecognizedStyleShapeErrorはRichTextDecodeErrorとして捕捉できること"""
        with pytest.raises(RichTextDecodeError):
            decode_style(None)


class TestElement:
    """Elementモデルのテスト"""

    def test_missing_style_defaults_to_plain_text(self) -> None:
        """styleがない要素はフラグなしのTextStyleになる"""
        element = Element.model_validate({"type": "text", "text": "hi"})
        assert element.style == TextStyle()

    def test_null_style_defaults_to_plain_text(self) -> None:
        """styleがnullの要素はフラグなしのTextStyleになる"""
        element = Element.model_validate({"type": "text", "text": "hi", "style": None})
        assert element.style == TextStyle()

    def test_null_style_on_list_is_unordered(self) -> None:
        """styleがnullのリスト要素は箇条書きになる"""
        element = Element.model_validate({"type": "rich_text_list", "style": None, "elements": []})
        assert element.style == ListStyle(kind="unordered")

    def test_missing_style_on_list_is_plain_text(self) -> None:
        """styleがないリスト要素はフラグなしのTextStyleになる"""
        element = Element.model_validate({"type": "rich_text_list", "elements": []})
        assert element.style == TextStyle()

    def test_list_element(self) -> None:
        """リスト要素のstyle・indent・borderがデコードされる"""
        element = Element.model_validate(
            {
                "type": "rich_text_list",
                "style": "ordered",
                "indent": 1,
                "border": 1,
                "elements": [{"type": "rich_text_section", "elements": [{"type": "text", "text": "a"}]}],
            }
        )
        assert element.style == ListStyle(kind="ordered")
        assert element.indent == 1
        assert element.border == 1
        assert element.elements[0].elements[0].text == "a"

    def test_unknown_type_is_accepted(self) -> None:
        """未知のtypeタグもデコードは成功する"""
        element = Element.model_validate({"type": "broadcast", "range": "here"})
        assert element.type == "broadcast"


class TestDecodeBlocks:
    """decode_blocks関数のテスト"""

    def test_decode_rich_text_block(self) -> None:
        """rich_textブロックが要素ツリーにデコードされる"""
        blocks = decode_blocks(
            [
                {
                    "type": "rich_text",
                    "block_id": "abc",
                    "elements": [
                        {
                            "type": "rich_text_section",
                            "elements": [
                                {"type": "text", "text": "hello", "style": {"bold": True}},
                                {"type": "user", "user_id": "U123"},
                            ],
                        }
                    ],
                }
            ]
        )
        assert len(blocks) == 1
        section = blocks[0].elements[0]
        assert section.elements[0].style == TextStyle(bold=True)
        assert section.elements[1].user_id == "U123"

    def test_nested_unrecognized_style_propagates(self) -> None:
        """ツリー深くの不正なstyleはUnrecognizedStyleShapeErrorとして伝播する"""
        raw = [
            {
                "type": "rich_text",
                "elements": [{"type": "rich_text_section", "elements": [{"type": "text", "text": "x", "style": 42}]}],
            }
        ]
        with pytest.raises(UnrecognizedStyleShapeError) as exc_info:
            decode_blocks(raw)
        assert exc_info.value.raw == 42

    def test_negative_indent_fails(self) -> None:
        """負のindentはデコードエラーになる"""
        raw = [{"type": "rich_text", "elements": [{"type": "rich_text_list", "style": "bullet", "indent": -1}]}]
        with pytest.raises(RichTextDecodeError, match="Invalid rich text blocks"):
            decode_blocks(raw)

    def test_non_list_fails(self) -> None:
        """blocksが配列でない場合はデコードエラーになる"""
        with pytest.raises(RichTextDecodeError, match="Blocks must be a list"):
            decode_blocks({"type": "rich_text"})  # type: ignore[arg-type]

    def test_foreign_block_elements_are_not_decoded(self) -> None:
        """rich_text以外のブロックの要素はデコードしない"""
        blocks = decode_blocks(
            [
                {
                    "type": "actions",
                    "elements": [{"type": "button", "text": {"type": "plain_text", "text": "OK"}}],
                }
            ]
        )
        assert blocks == [Block(type="actions", elements=[])]
