import unittest

from plan_fact_dashboard.loaders import normalise_payload
from plan_fact_dashboard.models import MonthData, Value

DECEMBER = {
    'plan': {'income': 5000, 'activePartners': 3},
    'fact': {'income': 4800, 'activePartners': 3},
}


def manager(months, **overrides):
    record = {'id': 1, 'adminId': 7, 'adminName': 'Anna', 'year': 2025, 'months': months}
    record.update(overrides)
    return record


class NormaliseTableTests(unittest.TestCase):
    def test_fields_are_mapped(self):
        months = [None] * 11 + [DECEMBER]
        payload = normalise_payload({'data': {'table': [manager(months)], 'total': []}})

        self.assertEqual(len(payload.managers), 1)
        m = payload.managers[0]
        self.assertEqual((m.id, m.admin_id, m.admin_name, m.year), (1, 7, 'Anna', 2025))
        self.assertEqual(len(m.months), 12)
        self.assertIsNone(m.months[0])
        self.assertEqual(
            m.months[11],
            MonthData(plan=Value(5000, 3), fact=Value(4800, 3)),
        )

    def test_short_month_list_is_padded_in_place(self):
        payload = normalise_payload({'data': {'table': [manager([DECEMBER, None, DECEMBER])]}})
        months = payload.managers[0].months
        self.assertEqual(len(months), 12)
        self.assertIsNotNone(months[0])
        self.assertIsNone(months[1])
        self.assertIsNotNone(months[2])
        self.assertTrue(all(m is None for m in months[3:]))

    def test_long_month_list_is_truncated(self):
        payload = normalise_payload({'data': {'table': [manager([DECEMBER] * 14)]}})
        self.assertEqual(len(payload.managers[0].months), 12)

    def test_malformed_sides_become_absent(self):
        months = [{'plan': 'oops', 'fact': {'income': 'abc'}}]
        payload = normalise_payload({'data': {'table': [manager(months)]}})
        first = payload.managers[0].months[0]
        self.assertIsNone(first.plan)
        # Values are passed through untouched
        self.assertEqual(first.fact.income, 'abc')
        self.assertIsNone(first.fact.active_partners)

    def test_non_object_entries_are_skipped(self):
        raw = {'data': {'table': ['junk', manager([]), None]}}
        with self.assertLogs('plan_fact_dashboard.loaders.normalise', level='WARNING'):
            payload = normalise_payload(raw)
        self.assertEqual(len(payload.managers), 1)


class NormaliseTotalTests(unittest.TestCase):
    def test_absent_entries_are_dropped(self):
        payload = normalise_payload({'data': {'total': [None, DECEMBER, None]}})
        self.assertEqual(len(payload.total), 1)
        self.assertEqual(payload.total[0].plan.income, 5000)

    def test_order_of_survivors_is_kept(self):
        jan = {'plan': {'income': 1}, 'fact': None}
        payload = normalise_payload({'data': {'total': [jan, None, DECEMBER]}})
        self.assertEqual([m.plan.income for m in payload.total], [1, 5000])

    def test_non_object_entries_are_dropped_too(self):
        payload = normalise_payload({'data': {'total': ['x', DECEMBER]}})
        self.assertEqual(len(payload.total), 1)
        self.assertNotIn(None, payload.total)

    def test_aligned_mode_keeps_twelve_slots(self):
        payload = normalise_payload(
            {'data': {'total': [None, DECEMBER, None]}},
            keep_total_alignment=True,
        )
        self.assertEqual(len(payload.total), 12)
        self.assertIsNone(payload.total[0])
        self.assertEqual(payload.total[1].fact.income, 4800)


class NormaliseShapeTests(unittest.TestCase):
    def test_missing_sections_default_to_empty(self):
        for raw in (None, {}, {'data': None}, {'data': {}}, [], 'text'):
            payload = normalise_payload(raw)
            self.assertEqual(payload.managers, ())
            self.assertEqual(payload.total, ())

    def test_non_list_sections_default_to_empty(self):
        payload = normalise_payload({'data': {'table': {'id': 1}, 'total': 5}})
        self.assertEqual(payload.managers, ())
        self.assertEqual(payload.total, ())


if __name__ == '__main__':
    unittest.main()
