import math
import unittest

from plan_fact_dashboard.dashboard import (
    build_table_view,
    month_at,
    table_view_to_frame,
    window_income_series,
)
from plan_fact_dashboard.loaders import normalise_payload
from plan_fact_dashboard.state import AppState, with_payload

DECEMBER = {
    'plan': {'income': 5000, 'activePartners': 3},
    'fact': {'income': 4800, 'activePartners': 3},
}


def state_for(months, total=None, current_index=0):
    raw = {
        'data': {
            'table': [{'id': 9, 'adminId': 3, 'adminName': 'Anna', 'year': 2025, 'months': months}],
            'total': total or [],
        }
    }
    state = with_payload(AppState(), normalise_payload(raw))
    return AppState(
        managers=state.managers,
        total=state.total,
        current_index=current_index,
        year=state.year,
    )


class TableViewTests(unittest.TestCase):
    def test_december_only_window_from_november(self):
        view = build_table_view(state_for([None] * 11 + [DECEMBER], current_index=10))

        self.assertEqual(view.slots, (10, 11, 0, 1, 2, 3))
        self.assertEqual(view.month_names[:2], ('November', 'December'))

        cells = view.managers[0].cells
        self.assertEqual([c.month_index for c in cells], [10, 11, 0, 1, 2, 3])
        self.assertEqual([c.empty for c in cells], [True, False, True, True, True, True])

        december = cells[1]
        self.assertEqual(december.month_name, 'December')
        self.assertEqual(december.plan_income, '$5,000')
        self.assertEqual(december.fact_income, '$4,800')
        self.assertEqual(december.plan_partners, 3)
        self.assertEqual(december.fact_partners, 3)

    def test_empty_cells_carry_no_display_values(self):
        view = build_table_view(state_for([None] * 12))
        cell = view.managers[0].cells[0]
        self.assertTrue(cell.empty)
        self.assertEqual((cell.plan_income, cell.fact_partners), ('', ''))

    def test_partially_reported_month_formats_missing_side_as_blank(self):
        months = [{'plan': {'income': 1200, 'activePartners': 2}, 'fact': None}]
        cell = build_table_view(state_for(months)).managers[0].cells[0]
        self.assertFalse(cell.empty)
        self.assertEqual(cell.plan_income, '$1,200')
        self.assertEqual(cell.fact_income, '')
        self.assertEqual(cell.fact_partners, '')

    def test_manager_rows_keep_identity(self):
        row = build_table_view(state_for([])).managers[0]
        self.assertEqual(row.label, 'Anna')
        self.assertEqual(row.manager_id, 9)

    def test_filtered_total_is_read_positionally(self):
        # Only the February aggregate is present; after filtering it sits at index 0
        total = [None, DECEMBER] + [None] * 10
        view = build_table_view(state_for([], total=total))
        cells = view.total.cells
        self.assertEqual(view.total.label, 'Total')
        self.assertFalse(cells[0].empty)
        self.assertTrue(all(c.empty for c in cells[1:]))

    def test_total_past_its_end_is_absent(self):
        self.assertIsNone(month_at((), 5))
        view = build_table_view(state_for([], total=[DECEMBER], current_index=6))
        self.assertTrue(all(c.empty for c in view.total.cells))

    def test_no_managers_still_yields_total_row(self):
        view = build_table_view(AppState())
        self.assertEqual(view.managers, ())
        self.assertEqual(len(view.total.cells), 6)


class TableFrameTests(unittest.TestCase):
    def test_frame_layout(self):
        view = build_table_view(state_for([None] * 11 + [DECEMBER], current_index=10))
        df = table_view_to_frame(view)

        self.assertEqual(
            list(df.columns),
            ['row', 'metric', 'November', 'December', 'January', 'February', 'March', 'April'],
        )
        # Total row first, then the manager
        self.assertEqual(list(df['row']), ['Total', 'Total', 'Anna', 'Anna'])

        anna = df[df['row'] == 'Anna'].set_index('metric')
        self.assertEqual(anna.loc['Income', 'December'], '$5,000 / $4,800')
        self.assertEqual(anna.loc['Active partners', 'December'], '3 / 3')
        self.assertEqual(anna.loc['Income', 'November'], 'No data')


class IncomeSeriesTests(unittest.TestCase):
    def test_series_is_numeric_with_nan_gaps(self):
        total = [DECEMBER, {'plan': {'income': '7000'}, 'fact': None}]
        view = build_table_view(state_for([], total=total))
        series = window_income_series(view)

        self.assertEqual(list(series['month']), ['January', 'February', 'March', 'April', 'May', 'June'])
        self.assertEqual(series.loc[0, 'plan_income'], 5000.0)
        self.assertEqual(series.loc[0, 'fact_income'], 4800.0)
        self.assertEqual(series.loc[1, 'plan_income'], 7000.0)
        self.assertTrue(math.isnan(series.loc[1, 'fact_income']))
        self.assertTrue(series.loc[2:, 'plan_income'].isna().all())


if __name__ == '__main__':
    unittest.main()
