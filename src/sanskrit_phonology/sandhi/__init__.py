from .rules import SANDHI_RULES, Boundary, Replacement, RuleName, SandhiRule
from .transducer import SandhiResult, SandhiTransducer, apply_sandhi, join
