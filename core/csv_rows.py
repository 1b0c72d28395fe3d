"""ETS group address CSV rows.

ETS imports a semicolon-separated file with one row per tree node and a
fixed 11-column layout:

    Main;Middle;Sub;Main;Middle;Sub;Central;Unfiltered;Description;DatapointType;Security
    Verlichting;;#;1;;;;;;;Auto
     ;Schakelen;#;1;0;;;;;;Auto
     ; ;Keuken;1;0;0;;;1.1.1;DPST-1-1;Auto

The first three columns hold the tree: a main group row puts its name in
column 1, a middle group row indents with a single space and puts its name
in column 2, an address row indents twice and puts its name in column 3.
"#" in column 3 marks a group row. The single spaces are read by the ETS
tree import and must be written as they are.
"""

from dpt import to_ets_id

from .group_address import parse_group_address
from .overview import HierarchicalOverview
from .sanitizer import capitalize_first, sanitize_name

DELIMITER = ";"
LINE_ENDING = "\r\n"

HEADER_COLUMNS = (
    "Main",
    "Middle",
    "Sub",
    "Main",
    "Middle",
    "Sub",
    "Central",
    "Unfiltered",
    "Description",
    "DatapointType",
    "Security",
)
HEADER_ROW = DELIMITER.join(HEADER_COLUMNS)

GROUP_MARKER = "#"
INDENT = " "
SECURITY_AUTO = "Auto"

_QUOTE_TRIGGERS = (DELIMITER, '"', "\n", "\r")


def escape_csv_value(value: str) -> str:
    """Quote a value for the semicolon-separated ETS file.

    Values containing the delimiter, a quote or a line break are quoted
    with inner quotes doubled. Values starting with "-" are quoted too so
    spreadsheets and ETS do not evaluate them as formulas.
    """
    if not value:
        return ""
    if any(c in value for c in _QUOTE_TRIGGERS) or value.startswith("-"):
        return '"' + value.replace('"', '""') + '"'
    return value


def _number(value: int | str) -> str:
    return "" if value == "" else str(value)


def build_csv_row(
    main_hierarchy: str,
    middle_hierarchy: str,
    sub_hierarchy: str,
    main: int | str = "",
    middle: int | str = "",
    sub: int | str = "",
    central: str = "",
    unfiltered: str = "",
    description: str = "",
    datapoint_type: str = "",
    security: str = SECURITY_AUTO,
) -> str:
    """Build one 11-column row. Address numbers are written unquoted."""
    return DELIMITER.join(
        [
            escape_csv_value(main_hierarchy),
            escape_csv_value(middle_hierarchy),
            escape_csv_value(sub_hierarchy),
            _number(main),
            _number(middle),
            _number(sub),
            escape_csv_value(central),
            escape_csv_value(unfiltered),
            escape_csv_value(description),
            escape_csv_value(datapoint_type),
            escape_csv_value(security),
        ]
    )


def build_rows(overview: HierarchicalOverview) -> list[str]:
    """Walk the tree and return the header plus one row per node.

    Main groups are sorted by number, middle groups by number within their
    main group. Addresses keep the order the generator produced. The
    overview itself is not modified.
    """
    rows = [HEADER_ROW]

    for main_group in sorted(overview.main_groups, key=lambda g: g.main):
        rows.append(
            build_csv_row(
                capitalize_first(sanitize_name(main_group.name)),
                "",
                GROUP_MARKER,
                main=main_group.main,
            )
        )

        for middle_group in sorted(main_group.middle_groups, key=lambda g: g.middle):
            rows.append(
                build_csv_row(
                    INDENT,
                    capitalize_first(sanitize_name(middle_group.name)),
                    GROUP_MARKER,
                    main=main_group.main,
                    middle=middle_group.middle,
                )
            )

            for address in middle_group.addresses:
                ga = parse_group_address(address.group_address)
                # ETS rejects nameless addresses
                name = sanitize_name(address.name)
                if not name.strip():
                    name = address.group_address
                rows.append(
                    build_csv_row(
                        INDENT,
                        INDENT,
                        name,
                        main=ga.main,
                        middle=ga.middle,
                        sub=ga.sub,
                        description=address.comment or "",
                        datapoint_type=to_ets_id(address.datapoint_type),
                    )
                )

    return rows


def assemble(rows: list[str]) -> str:
    """Join rows with CRLF, no trailing line break."""
    return LINE_ENDING.join(rows)


def build_ets_csv(overview: HierarchicalOverview) -> str:
    """Return the complete ETS CSV document as text."""
    return assemble(build_rows(overview))
