# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Domain services for the calendar Events domain."""

from typing import Iterable, List, Tuple

from .entities import ChangeEntry, EventState
from .temporal import compare_instants
from .value_objects import ChangeField, ChangeValue, Ordering

SUMMARY_SEPARATOR = ", "


class DiffEngine:
    """Domain service computing semantic field-level diffs between event states.

    Fields are checked in a fixed order (title, start, end, assigned_to,
    description) so that change lists and summaries are reproducible.
    Values are compared by meaning, not by representation:

    - instants are compared as absolute moments, so the same moment
      authored in two different zones is not a change;
    - assignments are compared as sets, so reordering is not a change.

    The authoring timezone label is deliberately not a tracked field.
    """

    @staticmethod
    def diff(old: EventState, proposed: EventState) -> Tuple[ChangeEntry, ...]:
        """Compute ordered change entries between two event states.

        Neither state is modified.

        Args:
            old: Currently committed state.
            proposed: State about to be committed.

        Returns:
            Tuple of ChangeEntry, empty when the states are equivalent.

        Example:
            >>> DiffEngine.diff(state, state)
            ()
        """
        changes: List[ChangeEntry] = []

        if old.title != proposed.title:
            changes.append(ChangeEntry(
                field=ChangeField.TITLE,
                old_value=ChangeValue.of_text(old.title),
                new_value=ChangeValue.of_text(proposed.title),
            ))

        if compare_instants(old.start, proposed.start) != Ordering.EQUAL:
            changes.append(ChangeEntry(
                field=ChangeField.START,
                old_value=ChangeValue.of_instant(old.start),
                new_value=ChangeValue.of_instant(proposed.start),
            ))

        if compare_instants(old.end, proposed.end) != Ordering.EQUAL:
            changes.append(ChangeEntry(
                field=ChangeField.END,
                old_value=ChangeValue.of_instant(old.end),
                new_value=ChangeValue.of_instant(proposed.end),
            ))

        old_ids = old.assigned_set()
        new_ids = proposed.assigned_set()
        if old_ids != new_ids:
            changes.append(ChangeEntry(
                field=ChangeField.ASSIGNED_TO,
                old_value=ChangeValue.of_ids(old_ids),
                new_value=ChangeValue.of_ids(new_ids),
            ))

        if old.description != proposed.description:
            changes.append(ChangeEntry(
                field=ChangeField.DESCRIPTION,
                old_value=ChangeValue.of_text(old.description),
                new_value=ChangeValue.of_text(proposed.description),
            ))

        return tuple(changes)

    @staticmethod
    def summarize(changes: Iterable[ChangeEntry]) -> str:
        """Render one clause per change, in diff order."""
        return SUMMARY_SEPARATOR.join(
            DiffEngine.describe(change) for change in changes
        )

    @staticmethod
    def describe(change: ChangeEntry) -> str:
        """Return the summary clause for a single change."""
        if change.field == ChangeField.TITLE:
            return (
                f'Title changed from "{change.old_value.text}" '
                f'to "{change.new_value.text}"'
            )
        if change.field == ChangeField.START:
            return "Start time updated"
        if change.field == ChangeField.END:
            return "End time updated"
        if change.field == ChangeField.ASSIGNED_TO:
            return "Attendee list updated"
        return f"{change.field.value.capitalize()} updated"
