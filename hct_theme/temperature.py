"""
Color temperature: warm/cool ordering of the hues at a color's chroma and tone.

Used to find a color's complement and its analogous colors. Temperatures
follow Ou, Woodcock and Wright's formula on L*a*b* hue and chroma.
"""

from functools import cached_property
import math

from .color_utils import lab_from_argb
from .hct import Hct
from .math_utils import round_half_up, sanitize_degrees_double, sanitize_degrees_int


class TemperatureCache:
    """
    Temperature queries around one input color.

    The 361 hue samples (0 through 360 inclusive) share the input's chroma
    and tone and are computed once, on first use.
    """

    def __init__(self, input_color: Hct):
        self.input = input_color

    @staticmethod
    def raw_temperature(color: Hct) -> float:
        """Warmth of a color; below 0 is cool, above 0 is warm."""
        _, a, b = lab_from_argb(color.argb)
        hue = sanitize_degrees_double(math.degrees(math.atan2(b, a)))
        chroma = math.hypot(a, b)
        return -0.5 + 0.02 * math.pow(chroma, 1.07) * math.cos(
            math.radians(sanitize_degrees_double(hue - 50.0)))

    @cached_property
    def hcts_by_hue(self) -> list:
        return [Hct.from_hct(hue, self.input.chroma, self.input.tone) for hue in range(361)]

    @cached_property
    def temps_by_hct(self) -> dict:
        return {hct: self.raw_temperature(hct) for hct in self.hcts_by_hue + [self.input]}

    @cached_property
    def hcts_by_temp(self) -> list:
        temps = self.temps_by_hct
        return sorted(self.hcts_by_hue + [self.input], key=lambda hct: temps[hct])

    @property
    def coldest(self) -> Hct:
        return self.hcts_by_temp[0]

    @property
    def warmest(self) -> Hct:
        return self.hcts_by_temp[-1]

    def relative_temperature(self, hct: Hct) -> float:
        """Temperature of hct scaled to 0 (coldest) - 1 (warmest)."""
        temps = self.temps_by_hct
        temp_range = temps[self.warmest] - temps[self.coldest]
        difference_from_coldest = temps[hct] - temps[self.coldest]
        # Grays have no temperature spread
        if temp_range == 0.0:
            return 0.5
        return difference_from_coldest / temp_range

    @property
    def input_relative_temperature(self) -> float:
        return self.relative_temperature(self.input)

    def complement(self) -> Hct:
        """The color whose relative temperature mirrors the input's."""
        temps = self.temps_by_hct
        coldest_hue = self.coldest.hue
        coldest_temp = temps[self.coldest]
        warmest_hue = self.warmest.hue
        warmest_temp = temps[self.warmest]
        temp_range = warmest_temp - coldest_temp

        start_hue_is_coldest_to_warmest = _is_between(self.input.hue, coldest_hue, warmest_hue)
        start_hue = warmest_hue if start_hue_is_coldest_to_warmest else coldest_hue
        end_hue = coldest_hue if start_hue_is_coldest_to_warmest else warmest_hue

        answer = self.hcts_by_hue[round_half_up(self.input.hue)]
        if temp_range == 0.0:
            return answer

        smallest_error = 1000.0
        complement_relative_temp = 1.0 - self.input_relative_temperature
        for hue_addend in range(361):
            hue = sanitize_degrees_double(start_hue + hue_addend)
            if not _is_between(hue, start_hue, end_hue):
                continue
            possible_answer = self.hcts_by_hue[round_half_up(hue)]
            relative_temp = (temps[possible_answer] - coldest_temp) / temp_range
            error = abs(complement_relative_temp - relative_temp)
            if error < smallest_error:
                smallest_error = error
                answer = possible_answer
        return answer

    def analogous(self, count: int = 5, divisions: int = 12) -> list:
        """
        Colors evenly spaced in temperature around the input.

        Args:
            count: Number of colors to return, the input included
            divisions: Number of temperature steps around the hue circle

        Returns:
            count colors with the input in the middle, cooler or warmer
            neighbours on either side
        """
        start_hue = round_half_up(self.input.hue)
        start_hct = self.hcts_by_hue[start_hue]
        last_temp = self.relative_temperature(start_hct)

        all_colors = [start_hct]

        absolute_total_temp_delta = 0.0
        for i in range(360):
            hue = sanitize_degrees_int(start_hue + i)
            temp = self.relative_temperature(self.hcts_by_hue[hue])
            absolute_total_temp_delta += abs(temp - last_temp)
            last_temp = temp

        hue_addend = 1
        temp_step = absolute_total_temp_delta / divisions
        total_temp_delta = 0.0
        last_temp = self.relative_temperature(start_hct)
        while len(all_colors) < divisions:
            hue = sanitize_degrees_int(start_hue + hue_addend)
            hct = self.hcts_by_hue[hue]
            temp = self.relative_temperature(hct)
            total_temp_delta += abs(temp - last_temp)

            desired_total_temp_delta = len(all_colors) * temp_step
            index_satisfied = total_temp_delta >= desired_total_temp_delta
            index_addend = 1
            # Large jumps in temperature can satisfy several steps at once
            while index_satisfied and len(all_colors) < divisions:
                all_colors.append(hct)
                desired_total_temp_delta = (len(all_colors) + index_addend) * temp_step
                index_satisfied = total_temp_delta >= desired_total_temp_delta
                index_addend += 1

            last_temp = temp
            hue_addend += 1
            if hue_addend > 360:
                while len(all_colors) < divisions:
                    all_colors.append(hct)
                break

        answers = [self.input]

        ccw_count = math.floor((count - 1) / 2.0)
        for i in range(1, ccw_count + 1):
            index = (0 - i) % len(all_colors)
            answers.insert(0, all_colors[index])

        cw_count = count - ccw_count - 1
        for i in range(1, cw_count + 1):
            index = i % len(all_colors)
            answers.append(all_colors[index])

        return answers


def _is_between(angle: float, a: float, b: float) -> bool:
    """Whether angle lies on the arc from a to b, travelling upward."""
    if a < b:
        return a <= angle <= b
    return a <= angle or angle <= b
