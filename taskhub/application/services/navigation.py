"""Role-conditional navigation.

A pure mapping from role to the sections its principals may open. Display
order follows the Section declaration order.
"""

from types import MappingProxyType

from taskhub.domain.enums import Section, UserRole

_SECTIONS_BY_ROLE = MappingProxyType(
    {
        UserRole.ADMIN: frozenset(
            {Section.DASHBOARD, Section.EMPLOYEES, Section.TASKS, Section.SETTINGS}
        ),
        UserRole.MANAGER: frozenset({Section.DASHBOARD, Section.EMPLOYEES, Section.TASKS}),
        UserRole.EMPLOYEE: frozenset({Section.DASHBOARD, Section.TASKS}),
    }
)


def visible_sections(role: UserRole | None) -> frozenset[Section]:
    """Sections visible to ``role``; nothing when unauthenticated."""
    if role is None:
        return frozenset()
    return _SECTIONS_BY_ROLE[role]


def ordered_sections(role: UserRole | None) -> list[Section]:
    """visible_sections() in display order."""
    visible = visible_sections(role)
    return [section for section in Section if section in visible]
