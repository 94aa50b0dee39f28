"""
Filtering engine that evaluates a configured chain and collects metrics
"""

import threading
from collections import defaultdict
from typing import Any, Dict

from ..event import LogEvent
from .base import FilterResult, evaluate_chain
from .config import FilterConfig


class FilterEngine:
    """Main filtering engine that applies the configured chain"""

    def __init__(self, config: FilterConfig):
        self.config = config
        self.head = config.build_chain()
        self.metrics: Dict[str, int] = defaultdict(int)
        self._filter_stats: Dict[str, Dict[str, int]] = defaultdict(
            lambda: defaultdict(int)
        )
        self._lock = threading.Lock()

    def decide(self, event: LogEvent) -> FilterResult:
        """Run the chain and return the final ACCEPT or DENY"""
        if not self.config.enabled:
            return FilterResult.ACCEPT

        if not self.config.collect_metrics:
            return evaluate_chain(self.head, event)

        result = FilterResult.ACCEPT
        decisions = []
        for i, filter_obj in enumerate(self.head or ()):
            decision = filter_obj.decide(event)
            decisions.append((f"{type(filter_obj).__name__}_{i}", decision))
            if decision is not FilterResult.NEUTRAL:
                result = decision
                break

        with self._lock:
            self.metrics["total_evaluated"] += 1
            self.metrics["accepted" if result is FilterResult.ACCEPT else "denied"] += 1
            for filter_name, decision in decisions:
                self._filter_stats[filter_name]["total"] += 1
                self._filter_stats[filter_name][decision.value] += 1

        return result

    def should_log(self, event: LogEvent) -> bool:
        return self.decide(event) is FilterResult.ACCEPT

    def get_metrics(self) -> Dict[str, Any]:
        """Get filtering metrics"""
        with self._lock:
            total_evaluated = self.metrics.get("total_evaluated", 0)
            accepted = self.metrics.get("accepted", 0)
            denied = self.metrics.get("denied", 0)
            filter_stats = {
                name: dict(stats) for name, stats in self._filter_stats.items()
            }

        return {
            "summary": {
                "total_evaluated": total_evaluated,
                "accepted": accepted,
                "denied": denied,
            },
            "filter_stats": filter_stats,
            "accept_rate": accepted / max(1, total_evaluated),
        }

    def reset_metrics(self):
        """Reset all metrics"""
        with self._lock:
            self.metrics.clear()
            self._filter_stats.clear()
