from core.config import (
    ENHANCED_TOOLTIP_TYPES,
    EVENT_TOOLTIP_HIDDEN,
    EVENT_TOOLTIP_SHOWN,
    TOOLTIP_BUILDING,
    TOOLTIP_UNIT,
    localize,
)
from core.logger_setup import get_logger

log = get_logger("TooltipEnhancer")

INFO_KEYS = {
    TOOLTIP_UNIT: "LOC_ENHANCED_TOOLTIP_UNIT_INFO",
    TOOLTIP_BUILDING: "LOC_ENHANCED_TOOLTIP_BUILDING_INFO",
}


class TooltipEnhancer:
    """
    Adds extra sections to unit and building tooltips.

    tooltips      host tooltip sink: mark_enhanced(), add_section(lines, style)
    unit_details  query_unit_details(unit_id, callback), callback(details or None) called later
    """

    def __init__(self, tooltips, unit_details, localize=localize, notifications=None, enabled=True):
        self.tooltips = tooltips
        self.unit_details = unit_details
        self.localize = localize
        self.enabled = enabled
        self.available = tooltips is not None
        self._shown = 0  # bumped on every show/hide, stale detail callbacks compare against it
        self._subscriptions = []

        if not self.available:
            log.error("[Tooltip] Could not find tooltip container, enhanced tooltips disabled")
            if notifications is not None:
                notifications.add_once("tooltip:unavailable", localize("LOC_ENHANCED_TOOLTIP_UNAVAILABLE"),
                                       level="error")

    def toggle(self):
        self.enabled = not self.enabled
        log.info(f"[Tooltip] Enhanced tooltips enabled={self.enabled}")
        return self.enabled

    # --- Host events ---
    def on_tooltip_shown(self, tooltip_type, tooltip_id):
        self._shown += 1
        if not (self.available and self.enabled):
            return
        if tooltip_type not in ENHANCED_TOOLTIP_TYPES:
            return
        self.enhance(tooltip_type, tooltip_id)

    def on_tooltip_hidden(self):
        self._shown += 1

    def attach(self, bus):
        if not self._subscriptions:
            self._subscriptions = [
                bus.subscribe(EVENT_TOOLTIP_SHOWN, self.on_tooltip_shown),
                bus.subscribe(EVENT_TOOLTIP_HIDDEN, self.on_tooltip_hidden),
            ]
        return list(self._subscriptions)

    def detach(self):
        for sub in self._subscriptions:
            sub.unsubscribe()
        self._subscriptions.clear()

    # --- Enhancement ---
    def enhance(self, tooltip_type, tooltip_id):
        self.tooltips.mark_enhanced()
        self.tooltips.add_section([self.localize(INFO_KEYS[tooltip_type])], style="info")

        if tooltip_type == TOOLTIP_UNIT and self.unit_details is not None:
            shown = self._shown
            self.unit_details.query_unit_details(
                tooltip_id, lambda details: self._on_unit_details(shown, tooltip_id, details))

    def _on_unit_details(self, shown, unit_id, details):
        if shown != self._shown:
            log.debug(f"[Tooltip] Dropping details for {unit_id}, tooltip changed")
            return
        if not details:
            log.debug(f"[Tooltip] No details for unit {unit_id}")
            return
        self.tooltips.add_section([
            f"{self.localize('LOC_ENHANCED_TOOLTIP_MOVEMENT')}: {details['Movement']}",
            f"{self.localize('LOC_ENHANCED_TOOLTIP_COST')}: {details['Cost']}",
        ], style="stats")
