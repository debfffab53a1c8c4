# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Calendar rendering — history in, iCalendar bytes out.
Rebuilt from the full history on every run, so output only depends on input.
"""

from datetime import date, datetime, time, timedelta, timezone
from html import escape
from typing import Mapping, Sequence
from urllib.parse import urlencode

from icalendar import Calendar, Event, Timezone
from icalendar.prop import vDuration

from triage_duty.models.domain import ComponentFilter, DutyCycle, GitHubQuery

PRODID = "-//triage-duty//Triage Duty Rotation//EN"


class TriageQueryBuilder:
    """Builds the triage-queue links shown in each event description."""

    def __init__(
        self,
        bugzilla_url: str,
        github_url: str,
        components: Sequence[ComponentFilter] = (),
        github_queries: Sequence[GitHubQuery] = (),
        lookback_days: int = 60,
    ) -> None:
        self._bugzilla_url = bugzilla_url
        self._github_url = github_url.rstrip("/")
        self._components = list(components)
        self._github_queries = list(github_queries)
        self._lookback = timedelta(days=lookback_days)

    def since(self, cycle_start: date) -> date:
        return cycle_start - self._lookback

    def bugzilla_query(self, cycle_start: date) -> str | None:
        """
        Untriaged defects in the configured components; None without components.
        Each product/component pair is one AND group of an OR boolean chart.
        """
        if not self._components:
            return None
        params: list[tuple[str, str]] = [
            ("query_format", "advanced"),
            ("bug_type", "defect"),
            ("resolution", "---"),
            ("bug_severity", "--"),
            ("chfield", "[Bug creation]"),
            ("chfieldfrom", self.since(cycle_start).isoformat()),
            ("chfieldto", "Now"),
            ("j_top", "OR"),
        ]
        n = 1
        for pair in dict.fromkeys((c.product, c.component) for c in self._components):
            product, component = pair
            params.extend([
                (f"f{n}", "OP"),
                (f"f{n + 1}", "product"), (f"o{n + 1}", "equals"), (f"v{n + 1}", product),
                (f"f{n + 2}", "component"), (f"o{n + 2}", "equals"), (f"v{n + 2}", component),
                (f"f{n + 3}", "CP"),
            ])
            n += 4
        return f"{self._bugzilla_url}?{urlencode(params)}"

    def github_query(self, query: GitHubQuery, cycle_start: date) -> str:
        terms = ["is:open", "is:issue"]
        terms.extend(f"label:{label}" for label in query.labels)
        terms.append(f"created:>{self.since(cycle_start).isoformat()}")
        return f"{self._github_url}/{query.repository}/issues?{urlencode({'q': ' '.join(terms)})}"

    def links(self, cycle_start: date) -> list[tuple[str, str, str]]:
        """(title, tooltip, url) for every configured triage queue."""
        result: list[tuple[str, str, str]] = []
        bugzilla = self.bugzilla_query(cycle_start)
        if bugzilla:
            result.append(("Untriaged Bugs in Bugzilla", "Bugzilla query", bugzilla))
        for query in self._github_queries:
            result.append((query.title, f"{query.repository} query", self.github_query(query, cycle_start)))
        return result


class CalendarBuilder:
    """Renders one all-day, cycle-long event per history entry."""

    def __init__(
        self,
        queries: TriageQueryBuilder,
        calendar_name: str,
        calendar_description: str,
        timezone_name: str,
        cycle_length_days: int = 7,
        refresh_hours: int = 1,
    ) -> None:
        self._queries = queries
        self._name = calendar_name
        self._description = calendar_description
        self._timezone = timezone_name
        self._cycle_length_days = cycle_length_days
        self._refresh = timedelta(hours=refresh_hours)

    def describe(self, cycle: DutyCycle) -> str:
        items = "".join(
            f'<li><a href="{escape(url)}" title="{escape(tooltip)}">{escape(title)}</a></li>'
            for title, tooltip, url in self._queries.links(cycle.start_date)
        )
        description = f"On duty this week: <strong>{escape(cycle.triager_name)}</strong>"
        if items:
            description += f"<ul>{items}</ul>"
        return description

    def build_event(self, cycle: DutyCycle) -> Event:
        event = Event()
        event.add("uid", f"triage-duty-{cycle.start_date.isoformat()}@{self._name.replace(' ', '-').lower()}")
        # DTSTAMP pinned to the cycle date keeps regeneration byte-identical
        event.add("dtstamp", datetime.combine(cycle.start_date, time(), tzinfo=timezone.utc))
        event.add("dtstart", cycle.start_date)
        event.add("dtend", cycle.end_date(self._cycle_length_days))
        event.add("summary", f"Triage Duty: {cycle.triager_name}")
        event.add("description", self.describe(cycle))
        event.add("transp", "TRANSPARENT")
        return event

    def build(self, history: Mapping[date, str]) -> Calendar:
        cal = Calendar()
        cal.add("prodid", PRODID)
        cal.add("version", "2.0")
        cal.add("calscale", "GREGORIAN")
        cal.add("method", "PUBLISH")
        cal.add("x-wr-calname", self._name)
        cal.add("x-wr-caldesc", self._description)
        cal.add("x-wr-timezone", self._timezone)
        cal.add("refresh-interval", vDuration(self._refresh), parameters={"VALUE": "DURATION"})
        cal.add("x-published-ttl", vDuration(self._refresh))
        cal.add_component(Timezone.from_tzid(self._timezone))
        for start_date in sorted(history):
            cal.add_component(
                self.build_event(DutyCycle(start_date=start_date, triager_name=history[start_date]))
            )
        return cal

    def render(self, history: Mapping[date, str]) -> bytes:
        return self.build(history).to_ical()

    def write(self, history: Mapping[date, str], path: str) -> int:
        """Write the calendar file; returns the number of events."""
        with open(path, "wb") as fh:
            fh.write(self.render(history))
        return len(history)
