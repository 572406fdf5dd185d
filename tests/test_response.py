import unittest

from deepseek_bridge.errors import SchemaValidationError, UnsupportedContentTypeError
from deepseek_bridge.response import from_choice, from_chunk_choice, from_completion, to_text_content
from deepseek_bridge.types import Part


class FromChoiceTests(unittest.TestCase):
    def test_missing_finish_reason_defaults_to_other(self) -> None:
        candidate = from_choice({"index": 0, "finish_reason": None, "message": {"content": "hello"}})
        self.assertEqual(candidate.index, 0)
        self.assertEqual(candidate.finish_reason, "other")
        self.assertEqual(candidate.message.role, "assistant")
        self.assertEqual(candidate.message.text, "hello")
        self.assertEqual(candidate.custom, {})

    def test_finish_reason_passes_through(self) -> None:
        candidate = from_choice({"index": 1, "finish_reason": "length", "message": {"content": "cut"}})
        self.assertEqual(candidate.finish_reason, "length")

    def test_dump_uses_framework_keys(self) -> None:
        candidate = from_choice({"index": 0, "finish_reason": "stop", "message": {"content": "hi"}})
        self.assertEqual(
            candidate.model_dump(by_alias=True),
            {
                "index": 0,
                "finishReason": "stop",
                "message": {"role": "assistant", "text": "hi"},
                "custom": {},
            },
        )

    def test_extra_fields_and_reasoning_go_to_custom(self) -> None:
        choice = {
            "index": 0,
            "finish_reason": "stop",
            "logprobs": {"content": []},
            "message": {"role": "assistant", "content": "42", "reasoning_content": "think"},
        }
        candidate = from_choice(choice)
        self.assertEqual(candidate.custom, {"logprobs": {"content": []}, "reasoning_content": "think"})

    def test_null_content_maps_to_empty_text(self) -> None:
        candidate = from_choice({"index": 0, "finish_reason": "tool_calls", "message": {"content": None}})
        self.assertEqual(candidate.message.text, "")

    def test_missing_message_is_schema_error(self) -> None:
        with self.assertRaises(SchemaValidationError):
            from_choice({"index": 0, "finish_reason": "stop"})

    def test_bad_index_is_schema_error(self) -> None:
        with self.assertRaises(SchemaValidationError):
            from_choice({"index": "first", "message": {"content": "x"}})


class FromChunkChoiceTests(unittest.TestCase):
    def test_delta_without_finish_reason(self) -> None:
        candidate = from_chunk_choice({"index": 0, "delta": {"content": "partial"}})
        self.assertEqual(candidate.finish_reason, "other")
        self.assertEqual(candidate.message.text, "partial")
        self.assertEqual(candidate.custom, {})

    def test_custom_is_empty_even_with_extras(self) -> None:
        candidate = from_chunk_choice(
            {"index": 0, "finish_reason": "stop", "logprobs": None, "delta": {"content": ""}}
        )
        self.assertEqual(candidate.finish_reason, "stop")
        self.assertEqual(candidate.custom, {})

    def test_missing_delta_is_schema_error(self) -> None:
        with self.assertRaises(SchemaValidationError):
            from_chunk_choice({"index": 0, "message": {"content": "x"}})


class FromCompletionTests(unittest.TestCase):
    def test_maps_choices_and_usage(self) -> None:
        completion = {
            "id": "cmpl-1",
            "choices": [
                {"index": 0, "finish_reason": "stop", "message": {"content": "a"}},
                {"index": 1, "finish_reason": "stop", "message": {"content": "b"}},
            ],
            "usage": {"prompt_tokens": 3, "completion_tokens": 2, "total_tokens": 5},
        }
        response = from_completion(completion)
        self.assertEqual([c.message.text for c in response.candidates], ["a", "b"])
        self.assertEqual(response.usage.input_tokens, 3)
        self.assertEqual(response.usage.output_tokens, 2)
        self.assertEqual(response.usage.total_tokens, 5)
        self.assertEqual(response.custom, completion)

    def test_missing_usage(self) -> None:
        response = from_completion({"choices": []})
        self.assertEqual(response.candidates, [])
        self.assertIsNone(response.usage.total_tokens)

    def test_missing_choices_is_schema_error(self) -> None:
        with self.assertRaises(SchemaValidationError):
            from_completion({"usage": None})


class ToTextContentTests(unittest.TestCase):
    def test_text_part(self) -> None:
        self.assertEqual(to_text_content(Part(text="hi")), {"type": "text", "text": "hi"})
        self.assertEqual(to_text_content({"text": "hi"}), {"type": "text", "text": "hi"})

    def test_part_without_text_fails(self) -> None:
        with self.assertRaises(UnsupportedContentTypeError):
            to_text_content({"media": {"url": "https://example.com/a.png"}})
        with self.assertRaises(UnsupportedContentTypeError):
            to_text_content(Part.model_validate({"media": {"url": "https://example.com/a.png"}}))


if __name__ == "__main__":
    unittest.main()
