"""Tests for reply parsing and the confidence gate."""

import pytest

from llm_validation.core.errors import MalformedResponseError
from llm_validation.core.options import BackendDefaults, CallOptions, merge_options
from llm_validation.core.parser import GENERIC_FAILURE_MESSAGE, evaluate_reply, parse_reply


def _resolved(**overrides):
    return merge_options(CallOptions(validation_prompt="must be about dogs", **overrides), BackendDefaults())


class TestParseReply:
    def test_full_reply(self):
        reply = parse_reply('{"verdict": false, "reason": "off topic", "confidence": 0.8}')

        assert reply.verdict is False
        assert reply.reason == "off topic"
        assert reply.confidence == 0.8

    def test_reason_and_confidence_are_optional(self):
        reply = parse_reply('{"verdict": true}')

        assert reply.verdict is True
        assert reply.reason is None
        assert reply.confidence is None

    @pytest.mark.parametrize("raw", [
        '{"v": true, "r": null, "c": 0.9}',
        '{"is_valid": true}',
        '{"VERDICT": true, "Reason": null}',
        '{"V": true}',
    ])
    def test_aliases_and_key_case_are_accepted(self, raw):
        assert parse_reply(raw).verdict is True

    def test_code_fences_are_stripped(self):
        raw = '```json\n{"verdict": false, "reason": "too short"}\n```'

        assert parse_reply(raw).reason == "too short"

    def test_object_is_extracted_from_surrounding_prose(self):
        raw = 'Here is my answer: {"verdict": true, "reason": null}. Hope it helps.'

        assert parse_reply(raw).verdict is True

    def test_trailing_comma_is_tolerated(self):
        assert parse_reply('{"verdict": true, "reason": null,}').verdict is True

    def test_unknown_fields_are_ignored(self):
        assert parse_reply('{"verdict": true, "notes": "extra"}').verdict is True

    @pytest.mark.parametrize("raw", [
        "",
        "   ",
        None,
        "yes, the text is about dogs",
        "[true]",
        '"true"',
        '{"reason": "no verdict here"}',
        '{"verdict": "true"}',
        '{"verdict": 1}',
        '{"verdict": true, "confidence": 1.5}',
        '{"verdict": true, "confidence": -0.1}',
    ])
    def test_malformed_replies_raise(self, raw):
        with pytest.raises(MalformedResponseError):
            parse_reply(raw)

    @pytest.mark.parametrize("raw", [
        '{"Verdict": true, "verdict": false}',
        '{"verdict": false, "VERDICT": true}',
        '{"verdict": true, "reason": "a", "Reason": "b"}',
    ])
    def test_keys_differing_only_in_case_are_malformed(self, raw):
        with pytest.raises(MalformedResponseError, match="duplicate key"):
            parse_reply(raw)

    @pytest.mark.parametrize("raw", [
        '[{"verdict": true}]',
        '[1, {"verdict": true, "reason": null}]',
        "true",
        "0.9",
    ])
    def test_non_object_json_is_not_searched_for_objects(self, raw):
        with pytest.raises(MalformedResponseError, match="expected a JSON object"):
            parse_reply(raw)

    def test_malformed_error_keeps_raw_text(self):
        with pytest.raises(MalformedResponseError) as exc_info:
            parse_reply("not json at all")
        assert exc_info.value.raw_response == "not json at all"
        assert exc_info.value.detail


class TestEvaluateReply:
    def test_positive_verdict_passes(self):
        verdict = evaluate_reply('{"verdict": true, "reason": null}', _resolved())

        assert verdict.is_valid is True
        assert verdict.raw_response == '{"verdict": true, "reason": null}'

    def test_negative_verdict_uses_reply_reason(self):
        verdict = evaluate_reply('{"verdict": false, "reason": "text is about cats, not dogs"}', _resolved())

        assert verdict.is_valid is False
        assert verdict.message == "text is about cats, not dogs"

    def test_custom_message_wins_over_reason(self):
        verdict = evaluate_reply(
            '{"verdict": false, "reason": "off topic"}',
            _resolved(error_message="Must mention dogs"),
        )

        assert verdict.is_valid is False
        assert verdict.message == "Must mention dogs"

    def test_negative_verdict_without_reason_gets_generic_message(self):
        verdict = evaluate_reply('{"verdict": false}', _resolved())

        assert verdict.message == GENERIC_FAILURE_MESSAGE

    def test_custom_message_is_not_used_on_pass(self):
        verdict = evaluate_reply('{"verdict": true}', _resolved(error_message="Must mention dogs"))

        assert verdict.is_valid is True
        assert verdict.message is None


class TestConfidenceGate:
    RAW = '{"verdict": true, "reason": null, "confidence": 0.40}'

    def test_low_confidence_fails_despite_positive_verdict(self):
        verdict = evaluate_reply(self.RAW, _resolved(min_confidence=0.60))

        assert verdict.is_valid is False
        assert "0.40" in verdict.message
        assert "0.60" in verdict.message

    def test_confidence_above_threshold_passes(self):
        verdict = evaluate_reply(self.RAW, _resolved(min_confidence=0.30))

        assert verdict.is_valid is True

    def test_confidence_equal_to_threshold_passes(self):
        verdict = evaluate_reply(self.RAW, _resolved(min_confidence=0.40))

        assert verdict.is_valid is True

    def test_gate_is_noop_without_confidence(self):
        verdict = evaluate_reply('{"verdict": true}', _resolved(min_confidence=0.9))

        assert verdict.is_valid is True

    def test_gate_is_noop_without_threshold(self):
        verdict = evaluate_reply('{"verdict": true, "confidence": 0.01}', _resolved())

        assert verdict.is_valid is True

    def test_gate_message_wins_over_custom_message(self):
        verdict = evaluate_reply(self.RAW, _resolved(min_confidence=0.6, error_message="Must mention dogs"))

        assert verdict.is_valid is False
        assert "threshold" in verdict.message
