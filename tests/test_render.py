from carwash.render import format_state_path, render_table
from carwash.table import CAR_WASH_TABLE


class TestRenderTable:
    def test_empty_matrix(self) -> None:
        assert render_table([]) == ""

    def test_small_matrix_layout(self) -> None:
        rendered = render_table([["δ", "1"], ["q0", "q10"]])
        assert rendered.splitlines() == [
            "+---+---+",
            "|  δ|  1|",
            "+---+---+",
            "| q0|q10|",
            "+---+---+",
        ]

    def test_car_wash_table(self) -> None:
        lines = render_table(CAR_WASH_TABLE.as_matrix()).splitlines()

        assert len(lines) == 2 * 23 + 1
        assert lines[0] == "+---+---+---+---+"
        assert lines[1] == "|  δ|  1|  2|  5|"
        assert lines[3] == "| q0| q1| q2| q5|"
        assert lines[-2] == "|q21|q21|q21|q21|"
        assert all(line == lines[0] for line in lines[::2])
        assert len({len(line) for line in lines}) == 1

    def test_ragged_rows_use_widest_row_for_border(self) -> None:
        lines = render_table([["a", "b", "c"], ["d"]]).splitlines()
        assert lines[0] == "+-+-+-+"
        assert lines[3] == "|d|"


class TestFormatStatePath:
    def test_path(self) -> None:
        assert format_state_path([0, 5, 10]) == "q0→q5→q10"

    def test_single_state(self) -> None:
        assert format_state_path((0,)) == "q0"
