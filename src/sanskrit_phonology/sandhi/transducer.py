import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

from ..config import CONFIG, EngineConfig
from ..text_frontend.cross_script import DEFAULT_NORMALIZER, CrossScriptNormalizer
from ..text_frontend.phoneme_table import PHONEME_TABLE
from ..text_frontend.script_detector import ScriptKind
from ..text_frontend.text_normalizer import clean_text
from ..text_frontend.tokenizer import Token, TokenSequence
from ..validation import validate_text
from .rules import SANDHI_RULES, Boundary, SandhiRule

logger = logging.getLogger(__name__)


class JoinResult(NamedTuple):
    sequence: TokenSequence
    rule: Optional[str]


@dataclass(frozen=True)
class SandhiResult:
    """Outcome of joining two words given as plain strings."""
    combined: str
    rule: Optional[str]
    script: ScriptKind

    def to_dict(self) -> dict:
        return {'combined': self.combined, 'rule': self.rule}


def _concatenate(left: TokenSequence, right: TokenSequence) -> TokenSequence:
    offset = len(left.text)
    shifted = tuple(
        Token(token.phoneme, token.surface, token.script, token.start + offset, token.inherent)
        for token in right
    )
    return TokenSequence(left.tokens + shifted, left.script)


class SandhiTransducer:
    """Joins two morphemes, applying the first sandhi rule that matches."""

    def __init__(self, rules: Tuple[SandhiRule, ...] = SANDHI_RULES,
                 normalizer: CrossScriptNormalizer = DEFAULT_NORMALIZER):
        self.rules = rules
        self.normalizer = normalizer

    def match(self, boundary: Boundary) -> Optional[SandhiRule]:
        for rule in self.rules:
            if rule.predicate(boundary):
                return rule
        return None

    def join(self, left: TokenSequence, right: TokenSequence) -> JoinResult:
        """Combine two token sequences at their boundary.

        Only the tokens next to the junction can change; the rest of both
        sequences passes through. Returns the combined sequence (in the
        left side's script, or the right's if the left is Unknown) and the
        name of the rule applied, or None for plain concatenation.
        """
        if not left:
            return JoinResult(right, None)
        if not right:
            return JoinResult(left, None)

        script = left.script if left.script is not ScriptKind.UNKNOWN else right.script
        if script is ScriptKind.UNKNOWN:
            return JoinResult(_concatenate(left, right), None)

        left_ids = self.normalizer.to_canonical(left)
        right_ids = self.normalizer.to_canonical(right)
        boundary = Boundary(
            tuple(item if item in PHONEME_TABLE else None for item in left_ids),
            tuple(item if item in PHONEME_TABLE else None for item in right_ids),
        )

        rule = self.match(boundary)
        if rule is None:
            combined = left_ids + right_ids
            rule_name = None
        else:
            replacement = rule.transform(boundary)
            combined = (left_ids[:len(left_ids) - replacement.left_consumed]
                        + replacement.ids
                        + right_ids[replacement.right_consumed:])
            rule_name = rule.name.value
            logger.debug("Sandhi %s: %r + %r", rule_name, left.text, right.text)

        return JoinResult(self.normalizer.to_tokens(combined, script), rule_name)

    def apply(self, left_text: str, right_text: str, config: EngineConfig = None) -> SandhiResult:
        """Join two words given as strings, detecting each one's script."""
        config = config or CONFIG
        validate_text(left_text, name='left_text')
        validate_text(right_text, name='right_text')
        if config.nfc_input:
            left_text, right_text = clean_text(left_text), clean_text(right_text)
        else:
            left_text, right_text = left_text.strip(), right_text.strip()

        tokenizer = self.normalizer.tokenizer
        left = tokenizer.tokenize(left_text)
        right = tokenizer.tokenize(right_text)
        sequence, rule = self.join(left, right)
        return SandhiResult(sequence.text, rule, sequence.script)


DEFAULT_TRANSDUCER = SandhiTransducer()


def join(left: TokenSequence, right: TokenSequence) -> JoinResult:
    return DEFAULT_TRANSDUCER.join(left, right)


def apply_sandhi(left_text: str, right_text: str, config: EngineConfig = None) -> SandhiResult:
    """Join two words and report the combined text and the rule applied."""
    return DEFAULT_TRANSDUCER.apply(left_text, right_text, config)
