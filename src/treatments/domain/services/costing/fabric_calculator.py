"""Fabric requirement calculation.

This module computes how much fabric a treatment consumes. Formula
selection follows the Strategy pattern:

- BlindFabricFormula: simple rectangular cut priced by area
- StandardFabricFormula: curtains with the standard header and bottom hems
- ConfiguredFabricFormula: curtains with a template hem configuration
  (side hems, seams, returns and waste)

The two curtain formulas differ in hem constants and rounding.

Orientation rule: the vertical repeat always applies along the roll
length (the cut length) and the horizontal repeat always across the roll
width. Vertical orientation cuts drop-length pieces and joins roll widths
across the rail; horizontal (railroaded) orientation cuts rail-length
pieces and stacks roll widths down the drop.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from treatments.domain.value_objects import (
    FabricSpec,
    HemConfiguration,
    Measurements,
    Orientation,
    TreatmentOptions,
)

from .config import EngineSettings
from .constants import CONFIGURED_QUANTITY_PRECISION, SEAM_SIDES
from .errors import InvalidFabricSpecError
from .models import FabricRequirement

# Absorbs float noise when a length is an exact multiple of a repeat or width
_EPSILON = 1e-9


def round_up_to_repeat(length: float, repeat: float) -> float:
    """Round a length up to the next whole multiple of a pattern repeat.

    Args:
        length: Length to round, in measurement units.
        repeat: Pattern repeat; 0 (or less) means no repeat.

    Returns:
        The smallest multiple of repeat that is >= length, or length
        unchanged when there is no repeat.

    Example:
        >>> round_up_to_repeat(225, 64)
        256
        >>> round_up_to_repeat(225, 0)
        225
    """
    if repeat <= 0 or length <= 0:
        return length
    return math.ceil(length / repeat - _EPSILON) * repeat


def count_widths(span: float, roll_width: float) -> int:
    """Number of whole roll widths needed to cover a span."""
    if roll_width <= 0:
        raise InvalidFabricSpecError(
            f"Fabric roll width must be positive to calculate curtain widths "
            f"(got {roll_width:g})"
        )
    return max(1, math.ceil(span / roll_width - _EPSILON))


@dataclass(frozen=True)
class _CurtainCut:
    """Cut geometry shared by the curtain formulas."""

    widths_per_panel: int
    cut_length: float
    across_needed: float
    along_needed: float

    def leftovers(self, roll_width: float, quantity: int) -> tuple[float, float]:
        """Waste along the roll length and across the roll width, all panels."""
        leftover_length = (
            (self.cut_length - self.along_needed) * self.widths_per_panel * quantity
        )
        leftover_width = (
            self.widths_per_panel * roll_width - self.across_needed
        ) * quantity
        return max(0.0, leftover_length), max(0.0, leftover_width)


def _plan_curtain_cut(
    per_panel_width: float, drop_needed: float, fabric: FabricSpec
) -> tuple[_CurtainCut, list[str]]:
    """Lay a panel onto the roll for the fabric's orientation.

    Returns:
        The cut geometry and the derivation steps.
    """
    steps: list[str] = []
    if fabric.orientation == Orientation.HORIZONTAL:
        across_needed, along_needed = drop_needed, per_panel_width
        across_label, along_label = "drop", "panel width"
    else:
        across_needed, along_needed = per_panel_width, drop_needed
        across_label, along_label = "panel width", "drop"

    across_rounded = round_up_to_repeat(across_needed, fabric.horizontal_repeat)
    if across_rounded != across_needed:
        steps.append(
            f"{across_label.capitalize()} to horizontal repeat: "
            f"{across_needed:.2f} -> {across_rounded:.2f}"
        )

    widths = count_widths(across_rounded, fabric.roll_width)
    noun = "pieces" if fabric.orientation == Orientation.HORIZONTAL else "widths"
    steps.append(
        f"{noun.capitalize()} per panel: ceil({across_rounded:.2f} / "
        f"{fabric.roll_width:g} roll width) = {widths}"
    )

    cut_length = round_up_to_repeat(along_needed, fabric.vertical_repeat)
    if cut_length != along_needed:
        steps.append(
            f"Cut length ({along_label}) to vertical repeat: "
            f"{along_needed:.2f} -> {cut_length:.2f}"
        )

    return (
        _CurtainCut(
            widths_per_panel=widths,
            cut_length=cut_length,
            across_needed=across_needed,
            along_needed=along_needed,
        ),
        steps,
    )


class FabricFormula(ABC):
    """Abstract base class for fabric requirement formulas."""

    name: str = "abstract"

    @abstractmethod
    def compute(
        self,
        measurements: Measurements,
        fabric: FabricSpec,
        options: TreatmentOptions,
        settings: EngineSettings,
    ) -> FabricRequirement:
        """Compute the fabric requirement.

        Args:
            measurements: Treatment measurements.
            fabric: Fabric specification.
            options: Treatment options.
            settings: Engine settings with unit and hem constants.

        Returns:
            FabricRequirement with quantity in selling units.
        """
        ...


class BlindFabricFormula(FabricFormula):
    """Blinds are rectangular cuts priced by area.

    No fullness, hems or pattern-repeat allowance apply.
    """

    name = "blind"

    def compute(
        self,
        measurements: Measurements,
        fabric: FabricSpec,
        options: TreatmentOptions,
        settings: EngineSettings,
    ) -> FabricRequirement:
        area = measurements.rail_width * measurements.drop
        quantity = area / settings.selling_unit_area * measurements.quantity
        unit = f"{settings.selling_unit}²"

        leftover_width = 0.0
        widths = 1
        if fabric.roll_width > 0:
            widths = count_widths(measurements.rail_width, fabric.roll_width)
            leftover_width = (
                widths * fabric.roll_width - measurements.rail_width
            ) * measurements.quantity

        explanation = "; ".join(
            [
                f"Area: {measurements.rail_width:g} x {measurements.drop:g} = "
                f"{area:.2f} {settings.measurement_unit}²",
                f"Required: {area:.2f} / {settings.selling_unit_area:.2f} "
                f"x {measurements.quantity} = {quantity:.3f} {unit}",
            ]
        )
        return FabricRequirement(
            quantity=quantity,
            unit=unit,
            total_length=0.0,
            widths_per_panel=widths,
            cut_length=measurements.drop,
            leftover_length=0.0,
            leftover_width=max(0.0, leftover_width),
            explanation=explanation,
        )


class StandardFabricFormula(FabricFormula):
    """Curtain formula using the standard header and bottom hems.

    Formula:
        per_panel_width = rail_width / quantity x fullness
        widths_per_panel = ceil(per_panel_width / roll_width)
        drop_needed = drop + pooling + header_hem + bottom_hem
        total_length = widths_per_panel x drop_needed x quantity
    """

    name = "standard"

    def compute(
        self,
        measurements: Measurements,
        fabric: FabricSpec,
        options: TreatmentOptions,
        settings: EngineSettings,
    ) -> FabricRequirement:
        unit = settings.measurement_unit
        quantity = measurements.quantity
        hem_allowance = settings.standard_hem_allowance
        per_panel_width = measurements.rail_width / quantity * options.fullness_ratio
        drop_needed = measurements.drop + measurements.pooling + hem_allowance

        steps = [
            f"Per panel width: {measurements.rail_width:g} / {quantity} x "
            f"{options.fullness_ratio:g} fullness = {per_panel_width:.2f} {unit}",
            f"Drop needed: {measurements.drop:g} + {measurements.pooling:g} pooling + "
            f"{hem_allowance:g} hems = {drop_needed:.2f} {unit}",
        ]
        cut, cut_steps = _plan_curtain_cut(per_panel_width, drop_needed, fabric)
        steps.extend(cut_steps)

        total_length = cut.widths_per_panel * cut.cut_length * quantity
        fabric_quantity = settings.to_selling_units(total_length)
        steps.append(
            f"Total length: {cut.widths_per_panel} x {cut.cut_length:.2f} x "
            f"{quantity} panel(s) = {total_length:.2f} {unit} = "
            f"{fabric_quantity:.2f} {settings.selling_unit}"
        )

        leftover_length, leftover_width = cut.leftovers(fabric.roll_width, quantity)
        return FabricRequirement(
            quantity=fabric_quantity,
            unit=settings.selling_unit,
            total_length=total_length,
            widths_per_panel=cut.widths_per_panel,
            cut_length=cut.cut_length,
            leftover_length=leftover_length,
            leftover_width=leftover_width,
            explanation="; ".join(steps),
        )


class ConfiguredFabricFormula(FabricFormula):
    """Curtain formula driven by a template hem configuration.

    Formula:
        returns = 2 x return_depth
        per_panel_width = (rail_width x fullness + returns) / quantity + 2 x side_hem
        drop_needed = drop + pooling + header_hem + bottom_hem
        seam_allowance = (widths_per_panel - 1) x seam_hem x 2 x quantity
        total_length = widths_per_panel x drop_needed x quantity + seam_allowance
        fabric_quantity = round(total_length x (1 + waste%), 2)
    """

    name = "configured"

    def __init__(self, hems: HemConfiguration) -> None:
        self.hems = hems

    def compute(
        self,
        measurements: Measurements,
        fabric: FabricSpec,
        options: TreatmentOptions,
        settings: EngineSettings,
    ) -> FabricRequirement:
        hems = self.hems
        unit = settings.measurement_unit
        quantity = measurements.quantity
        returns = 2 * measurements.return_depth
        per_panel_width = (
            measurements.rail_width * options.fullness_ratio + returns
        ) / quantity + 2 * hems.side_hem
        drop_needed = measurements.drop + measurements.pooling + hems.hem_allowance

        steps = [
            f"Per panel width: ({measurements.rail_width:g} x "
            f"{options.fullness_ratio:g} fullness + {returns:g} returns) / "
            f"{quantity} + 2 x {hems.side_hem:g} side hem = "
            f"{per_panel_width:.2f} {unit}",
            f"Drop needed: {measurements.drop:g} + {measurements.pooling:g} pooling + "
            f"{hems.header_hem:g} header + {hems.bottom_hem:g} bottom = "
            f"{drop_needed:.2f} {unit}",
        ]
        cut, cut_steps = _plan_curtain_cut(per_panel_width, drop_needed, fabric)
        steps.extend(cut_steps)

        seams_per_panel = max(0, cut.widths_per_panel - 1)
        seam_allowance = seams_per_panel * hems.seam_hem * SEAM_SIDES * quantity
        if seam_allowance:
            steps.append(
                f"Seam allowance: {seams_per_panel} seam(s) x {hems.seam_hem:g} x "
                f"{SEAM_SIDES} sides x {quantity} panel(s) = {seam_allowance:.2f} {unit}"
            )

        total_length = cut.widths_per_panel * cut.cut_length * quantity + seam_allowance
        raw_quantity = settings.to_selling_units(total_length)
        fabric_quantity = round(
            raw_quantity * (1 + hems.waste_percent / 100),
            CONFIGURED_QUANTITY_PRECISION,
        )
        total_step = (
            f"Total length: {cut.widths_per_panel} x {cut.cut_length:.2f} x "
            f"{quantity} panel(s) + {seam_allowance:.2f} seams = "
            f"{total_length:.2f} {unit} = {raw_quantity:.2f} {settings.selling_unit}"
        )
        if hems.waste_percent:
            total_step += (
                f" + {hems.waste_percent:g}% waste = "
                f"{fabric_quantity:.2f} {settings.selling_unit}"
            )
        steps.append(total_step)

        leftover_length, leftover_width = cut.leftovers(fabric.roll_width, quantity)
        return FabricRequirement(
            quantity=fabric_quantity,
            unit=settings.selling_unit,
            total_length=total_length,
            widths_per_panel=cut.widths_per_panel,
            cut_length=cut.cut_length,
            leftover_length=leftover_length,
            leftover_width=leftover_width,
            explanation="; ".join(steps),
        )


def select_fabric_formula(options: TreatmentOptions) -> FabricFormula:
    """Select the fabric formula for a treatment.

    Args:
        options: Treatment options (category and hem configuration).

    Returns:
        BlindFabricFormula for blinds, ConfiguredFabricFormula for curtains
        with a hem configuration, otherwise StandardFabricFormula.
    """
    if options.is_blind:
        return BlindFabricFormula()
    if options.hem_configuration is not None:
        return ConfiguredFabricFormula(options.hem_configuration)
    return StandardFabricFormula()


class FabricRequirementCalculator:
    """Service for computing fabric requirements.

    Selects the fabric formula from the treatment options and applies it
    with the engine settings.
    """

    def __init__(self, settings: EngineSettings | None = None) -> None:
        self.settings = settings or EngineSettings()

    def compute(
        self,
        measurements: Measurements,
        fabric: FabricSpec,
        options: TreatmentOptions,
    ) -> FabricRequirement:
        """Compute fabric required for a treatment.

        Raises:
            InvalidFabricSpecError: If a curtain needs a non-positive roll width.
        """
        formula = select_fabric_formula(options)
        return formula.compute(measurements, fabric, options, self.settings)
