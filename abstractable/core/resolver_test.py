from absl.testing import parameterized

from abstractable import testing
from abstractable.core import pedigree
from abstractable.core import registry
from abstractable.core import resolver
from abstractable.core.meta import Abstractable


def _define_lists():
    class AbstractList(Abstractable):
        pass

    AbstractList.abstract("size", "empty", "add")

    class NotImplList(AbstractList):
        pass

    class OneImplList(AbstractList):
        def size(self):
            return 0

    class AllImplList(OneImplList):
        def empty(self):
            return True

        def add(self, item):
            pass

    return AbstractList, NotImplList, OneImplList, AllImplList


class NotImplementedInfoTest(testing.TestCase):
    def test_empty_values_are_not_stored(self):
        info = resolver.NotImplementedInfo()
        info["a"] = []
        info["b"] = ("x",)
        info.update({"c": [], "d": ["y"]})
        info.setdefault("e", [])
        self.assertEqual(info, {"b": ["x"], "d": ["y"]})
        self.assertEqual(
            resolver.NotImplementedInfo(a=[], b=["x"]), {"b": ["x"]}
        )

    def test_setdefault(self):
        info = resolver.NotImplementedInfo(b=["x"])
        self.assertEqual(info.setdefault("a"), [])
        self.assertNotIn("a", info)
        self.assertEqual(info.setdefault("b", ["y"]), ["x"])
        self.assertEqual(info.setdefault("c", ("z",)), ["z"])
        self.assertEqual(info, {"b": ["x"], "c": ["z"]})


class NotImplementedInfoFinderTest(testing.TestCase, parameterized.TestCase):
    @parameterized.named_parameters(
        ("not_implemented", "NotImplList", ["size", "empty", "add"]),
        ("one_implemented", "OneImplList", ["empty", "add"]),
        ("all_implemented", "AllImplList", None),
    )
    def test_single_ancestor(self, class_name, expected):
        classes = dict(
            zip(
                ("AbstractList", "NotImplList", "OneImplList", "AllImplList"),
                _define_lists(),
            )
        )
        expected_info = {}
        if expected is not None:
            expected_info = {classes["AbstractList"]: expected}
        self.assertNotImplementedInfo(classes[class_name], expected_info)

    def test_chain_of_declaring_ancestors(self):
        class AbstractCollection(Abstractable):
            pass

        AbstractCollection.abstract("add", "remove")

        class AbstractQueue(AbstractCollection):
            pass

        AbstractQueue.abstract("clear")

        class PriorityQueue(AbstractQueue):
            pass

        finder = resolver.NotImplementedInfoFinder()
        self.assertEqual(
            finder.find(PriorityQueue),
            {
                AbstractCollection: ["add", "remove"],
                AbstractQueue: ["clear"],
            },
        )
        self.assertEqual(
            list(finder.find(PriorityQueue)),
            [AbstractCollection, AbstractQueue],
        )
        self.assertEqual(
            finder.find(AbstractQueue), {AbstractCollection: ["add", "remove"]}
        )
        self.assertEqual(finder.find(AbstractCollection), {})

    def test_mixins(self):
        class AbstractAddressHolder(Abstractable):
            pass

        AbstractAddressHolder.abstract("city", "state", "zip")

        class AbstractNameHolder(Abstractable):
            pass

        AbstractNameHolder.abstract("last_name", "first_name")

        class OneImplAddressHolder(AbstractAddressHolder):
            def state(self):
                pass

        class TwoImplAddressAndNameHolder(
            AbstractNameHolder, OneImplAddressHolder
        ):
            def first_name(self):
                pass

        self.assertNotImplementedInfo(
            OneImplAddressHolder, {AbstractAddressHolder: ["city", "zip"]}
        )
        self.assertNotImplementedInfo(
            TwoImplAddressAndNameHolder,
            {
                AbstractAddressHolder: ["city", "zip"],
                AbstractNameHolder: ["last_name"],
            },
        )

    def test_plain_mixin_contract(self):
        class Comparable:
            pass

        registry.abstract(Comparable, "compare")

        class CompareImpl:
            def compare(self, other):
                return 0

        class Version(CompareImpl, Comparable):
            pass

        class BrokenVersion(Comparable, CompareImpl):
            pass

        # `CompareImpl` is more specific than `Comparable` in the chain of
        # `Version` only.
        self.assertNotImplementedInfo(Version, {})
        self.assertNotImplementedInfo(BrokenVersion, {Comparable: ["compare"]})

    def test_siblings_are_independent(self):
        class AbstractFormatter(Abstractable):
            pass

        AbstractFormatter.abstract("format")

        class AFormatter(AbstractFormatter):
            def format(self):
                pass

        class BFormatter(AbstractFormatter):
            pass

        self.assertNotImplementedInfo(AFormatter, {})
        self.assertNotImplementedInfo(
            BFormatter, {AbstractFormatter: ["format"]}
        )

    def test_redeclared_name_does_not_satisfy(self):
        class Closeable(Abstractable):
            pass

        Closeable.abstract("close")

        class Stream(Closeable):
            pass

        Stream.abstract("close")

        class FileStream(Stream):
            pass

        self.assertNotImplementedInfo(
            FileStream, {Closeable: ["close"], Stream: ["close"]}
        )

        class SocketStream(Stream):
            def close(self):
                pass

        self.assertNotImplementedInfo(SocketStream, {})

    def test_inherited_override_does_not_count_for_ancestor(self):
        class Runner(Abstractable):
            pass

        Runner.abstract("run")

        class Impl:
            def run(self):
                pass

        # `Impl` is more general than `Runner` in this chain.
        class Broken(Runner, Impl):
            pass

        self.assertNotImplementedInfo(Broken, {Runner: ["run"]})

    def test_non_participating_target(self):
        class Plain:
            pass

        self.assertEqual(resolver.find_not_implemented_info(Plain), {})

    def test_find_implementations(self):
        class AbstractCollection(Abstractable):
            pass

        AbstractCollection.abstract("add", "remove")

        class AddMixin:
            def add(self, item):
                pass

        class BaseCollection(AbstractCollection):
            def add(self, item):
                pass

            def remove(self, item):
                pass

        class Bag(AddMixin, BaseCollection):
            pass

        finder = resolver.NotImplementedInfoFinder()
        self.assertEqual(
            finder.find_implementations(Bag),
            ((AddMixin, "add"), (BaseCollection, "remove")),
        )
        self.assertEqual(finder.find_implementations(AbstractCollection), ())


class StaticNotImplementedInfoTest(testing.TestCase):
    def test_find_from_static(self):
        class AbstractApplication:
            pass

        registry.abstract_static(AbstractApplication, "name")

        class NotImplApplication(AbstractApplication):
            pass

        class Application(AbstractApplication):
            @classmethod
            def name(cls):
                return "app"

        namespace = pedigree.static_namespace_of(AbstractApplication)
        self.assertEqual(
            resolver.find_not_implemented_info_from_static(NotImplApplication),
            {namespace: ["name"]},
        )
        self.assertEqual(
            resolver.find_not_implemented_info_from_static(Application), {}
        )
        # The instance chain doesn't see static declarations.
        self.assertEqual(
            resolver.find_not_implemented_info(NotImplApplication), {}
        )

    def test_instance_method_does_not_satisfy_static(self):
        class Plugin:
            pass

        registry.abstract_static(Plugin, "create")

        class BrokenPlugin(Plugin):
            def create(self):
                pass

        class StaticPlugin(Plugin):
            @staticmethod
            def create():
                pass

        self.assertNotImplementedInfo(
            BrokenPlugin,
            {pedigree.static_namespace_of(Plugin): ["create"]},
            static=True,
        )
        self.assertNotImplementedInfo(StaticPlugin, {}, static=True)
