"""
helloworld.api.contracts.greeting_policy

Purpose:
    Greeting lines rendered into index.html and the placeholder they replace.
    The page handler picks one based on the Redis connectivity probe.

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GreetingPolicy:
    template_name: str = "index.html"
    placeholder: str = "{{LEAD}}"

    connected: str = "This is a simple service application(connected to Redis). Deployed by Cloud 66 ~"
    standalone: str = "This is a simple single service application. Deployed by Cloud 66"

    def lead_for(self, cache_reachable: bool) -> str:
        return self.connected if cache_reachable else self.standalone

    def render(self, template: str, *, cache_reachable: bool) -> str:
        return template.replace(self.placeholder, self.lead_for(cache_reachable))
