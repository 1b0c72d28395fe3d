"""Hierarchical group address overview — the input of the ETS CSV export.

The overview is built by the group address generator for one export and
mirrors the ETS 5/6 three-level tree:

    HierarchicalOverview
      mainGroups: [MainGroupNode]          main 0-31, e.g. "Verlichting"
        middleGroups: [MiddleGroupNode]    middle 0-7, e.g. "Schakelen"
          addresses: [AddressEntry]        "1/0/0", name, comment, DPT

Field names follow the generator's JSON (camelCase); Python attributes are
snake_case. Both spellings are accepted on input.
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _none_to_empty(value: Any) -> Any:
    return "" if value is None else value


# Generators emit null for names and comments they have no text for
Text = Annotated[str, BeforeValidator(_none_to_empty)]


class AddressEntry(BaseModel):
    """A single group address row."""

    model_config = ConfigDict(populate_by_name=True)

    group_address: Text = Field(
        default="", alias="groupAddress", description="Group address ('1/0/0' or '1/0')"
    )
    name: Text = Field(default="", description="Full display name of the address")
    comment: Text = Field(default="", description="Physical address / channel annotation")
    datapoint_type: Text = Field(
        default="", alias="datapointType", description="Human DPT code, e.g. 'DPT1.001'"
    )


class MiddleGroupNode(BaseModel):
    """Middle group (0-7) with its addresses in generation order."""

    model_config = ConfigDict(populate_by_name=True)

    middle: int
    name: Text = ""
    addresses: list[AddressEntry] = Field(default_factory=list)


class MainGroupNode(BaseModel):
    """Main group (conventionally 0-31)."""

    model_config = ConfigDict(populate_by_name=True)

    main: int
    name: Text = ""
    middle_groups: list[MiddleGroupNode] = Field(
        default_factory=list, alias="middleGroups"
    )


class HierarchicalOverview(BaseModel):
    """Complete group address tree for one export."""

    model_config = ConfigDict(populate_by_name=True)

    main_groups: list[MainGroupNode] = Field(default_factory=list, alias="mainGroups")

    def counts(self) -> tuple[int, int, int]:
        """Return (main groups, middle groups, addresses)."""
        middles = [mg for main in self.main_groups for mg in main.middle_groups]
        addresses = sum(len(mg.addresses) for mg in middles)
        return len(self.main_groups), len(middles), addresses
