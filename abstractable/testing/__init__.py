from abstractable.testing.test_case import TestCase
