from typing import Iterable, List, Optional, Tuple
from .models import FileRecord, Rule
from .default_rules import DEFAULT_RULES

class RuleSet:
    """Ordered (pattern, target folder) rules; the first match wins."""
    def __init__(self, rules: Optional[Iterable[Rule]] = None):
        self.rules: List[Rule] = list(DEFAULT_RULES if rules is None else rules)

    def __iter__(self):
        return iter(self.rules)

    def index_of(self, rec: FileRecord) -> Optional[int]:
        for i, rule in enumerate(self.rules):
            if rule.matches(rec.name):
                return i
        return None

class Classifier:
    """Buckets FileRecords by the first rule that claims them."""
    def __init__(self, rule_set: RuleSet):
        self.rules = rule_set

    def group(self, files: List[FileRecord]) -> List[Tuple[Rule, List[FileRecord]]]:
        """Files bucketed per rule, in rule order. Each file lands in one bucket."""
        buckets: List[List[FileRecord]] = [[] for _ in self.rules]
        for f in files:
            i = self.rules.index_of(f)
            if i is not None:
                buckets[i].append(f)
        return list(zip(self.rules, buckets))
