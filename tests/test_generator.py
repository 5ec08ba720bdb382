"""Tests for the Substance program generator."""

import pytest

from subsynth.config.settings import ArgOption, GenericOption
from subsynth.domain.schema import DomainSchema
from subsynth.generator.program import Declaration, PredicateApplication, VarRef


def assert_well_formed(program, schema):
    """Every argument refers to an earlier declaration of the required type."""
    declared = {}
    for stmt in program.statements:
        if isinstance(stmt, Declaration):
            assert stmt.name not in declared, f"{stmt.name} declared twice"
            declared[stmt.name] = stmt.type_name
        else:
            pred = schema.predicates[stmt.predicate]
            arg_types = getattr(pred, "arg_types", ())
            assert len(stmt.args) == len(arg_types)
            for arg, expected in zip(stmt.args, arg_types):
                assert declared.get(arg.name) == expected


class TestProgramShape:

    def test_real_only_domain_generated_policy(self, real_schema, make_generator):
        gen = make_generator(real_schema, min_length=2, max_length=2, arg_option=ArgOption.GENERATED)
        program = gen.generate_program()

        assert program.header_count in (1, 2)
        assert program.body_count == 2
        assert len(program) == program.header_count + 2
        assert all(isinstance(s, Declaration) for s in program.statements)
        assert all(s.type_name == "Real" for s in program.statements)
        expected = ["r", "r1", "r2", "r3"][: len(program)]
        assert [s.name for s in program.statements] == expected

    def test_header_declarations_come_first(self, set_schema, make_generator):
        gen = make_generator(set_schema)
        program = gen.generate_program()
        header = program.statements[: program.header_count]
        assert all(isinstance(s, Declaration) for s in header)

    def test_zero_length_body(self, set_schema, make_generator):
        gen = make_generator(set_schema, min_length=0, max_length=0)
        program = gen.generate_program()
        assert program.body_count == 0
        assert len(program) == program.header_count

    def test_body_count_in_range(self, set_schema, make_generator):
        gen = make_generator(set_schema, min_length=3, max_length=6)
        for _ in range(20):
            program = gen.generate_program()
            assert 3 <= program.body_count <= 6
            assert len(program) >= program.header_count + program.body_count
            assert len(program.applications()) <= program.body_count
            gen.reset()

    @pytest.mark.parametrize("option", list(ArgOption))
    def test_programs_are_well_formed(self, set_schema, make_generator, option):
        gen = make_generator(set_schema, min_length=5, max_length=15, arg_option=option, seed=123)
        for _ in range(10):
            assert_well_formed(gen.generate_program(), set_schema)
            gen.reset()

    def test_no_predicates_only_declarations(self, make_generator):
        schema = DomainSchema.from_dict({"types": ["Point"]})
        gen = make_generator(schema, min_length=4, max_length=8)
        program = gen.generate_program()
        assert program.applications() == []
        assert [s.name for s in program.statements][:3] == ["p", "p1", "p2"]

    def test_reset_clears_names_and_statements(self, set_schema, make_generator):
        gen = make_generator(set_schema)
        gen.generate_program()
        gen.reset()
        assert len(gen.builder) == 0
        assert gen.names.counters == {}
        assert gen.names.declared == {}


class TestArguments:

    def test_existing_falls_back_to_generated_once(self, make_generator):
        schema = DomainSchema.from_dict({"types": ["Set"], "predicates": {"Empty": ["Set"]}})
        gen = make_generator(schema, arg_option=ArgOption.EXISTING)
        stmt = gen.generate_predicate()

        assert gen.builder.statements == (
            Declaration("Set", "s"),
            PredicateApplication("Empty", (VarRef("s"),)),
        )
        assert stmt.args == (VarRef("s"),)

    def test_existing_reuses_without_declaring(self, make_generator, set_schema):
        gen = make_generator(set_schema, arg_option=ArgOption.EXISTING)
        gen.declare("Set")
        gen.declare("Set")
        before = len(gen.builder)
        for _ in range(10):
            assert gen.generate_arg("Set").name in ("s", "s1")
        assert len(gen.builder) == before

    def test_generated_declares_every_time(self, make_generator, set_schema):
        gen = make_generator(set_schema, arg_option=ArgOption.GENERATED)
        for i in range(1, 6):
            ref = gen.generate_arg("Point")
            assert len(gen.builder) == i
            assert ref.name in gen.names.declared_of("Point")

    def test_mixed_uses_both_behaviours(self, make_generator, set_schema):
        gen = make_generator(set_schema, arg_option=ArgOption.MIXED, seed=1)
        gen.declare("Set")
        sizes = []
        for _ in range(40):
            before = len(gen.builder)
            gen.generate_arg("Set")
            sizes.append(len(gen.builder) - before)
        assert 0 in sizes
        assert 1 in sizes
        assert set(sizes) <= {0, 1}

    def test_explicit_option_overrides_setting(self, make_generator, set_schema):
        gen = make_generator(set_schema, arg_option=ArgOption.EXISTING)
        gen.generate_arg("Set", ArgOption.GENERATED)
        gen.generate_arg("Set", ArgOption.GENERATED)
        assert gen.names.declared_of("Set") == ["s", "s1"]

    def test_arguments_follow_declared_order(self, make_generator):
        schema = DomainSchema.from_dict({"types": ["Set", "Point"], "predicates": {"In": ["Point", "Set"]}})
        gen = make_generator(schema, arg_option=ArgOption.GENERATED)
        stmt = gen.generate_predicate()
        assert [a.name for a in stmt.args] == ["p", "s"]
        assert [type(s) for s in gen.builder.statements] == [Declaration, Declaration, PredicateApplication]


class TestPredicates:

    def test_binary_predicate_has_no_arguments(self, make_generator):
        schema = DomainSchema.from_dict({"types": ["Set"], "predicates": {"Not": {"binary": True}}})
        gen = make_generator(schema, arg_option=ArgOption.GENERATED)
        stmt = gen.generate_predicate()
        assert stmt == PredicateApplication("Not", ())
        assert gen.builder.statements == (stmt,)

    def test_unknown_predicate_kind(self, make_generator, set_schema):
        gen = make_generator(set_schema)
        with pytest.raises(TypeError):
            gen.predicate_args(object())

    def test_zero_argument_unary_predicate(self, make_generator):
        schema = DomainSchema.from_dict({"types": ["Set"], "predicates": {"Done": []}})
        gen = make_generator(schema)
        assert gen.generate_predicate() == PredicateApplication("Done", ())


class TestNameSharing:

    def test_types_with_same_initial_share_counter(self, make_generator):
        schema = DomainSchema.from_dict({"types": ["Real", "Rectangle"]})
        gen = make_generator(schema)
        decls = [gen.declare("Real"), gen.declare("Rectangle"), gen.declare("Real")]
        assert decls == [
            Declaration("Real", "r"),
            Declaration("Rectangle", "r1"),
            Declaration("Real", "r2"),
        ]
        assert gen.names.declared_of("Real") == ["r", "r2"]
        assert gen.names.declared_of("Rectangle") == ["r1"]


class TestGenericOption:

    def test_concrete_declares_exact_type(self, make_generator, set_schema):
        gen = make_generator(set_schema)
        assert gen.declare("Set", GenericOption.CONCRETE) == Declaration("Set", "s")

    def test_general_may_pick_subtype(self, make_generator, set_schema):
        gen = make_generator(set_schema, seed=2)
        types = {gen.declare("Set", GenericOption.GENERAL).type_name for _ in range(40)}
        assert types == {"Set", "Point"}

    def test_general_without_subtypes(self, make_generator, set_schema):
        gen = make_generator(set_schema)
        assert gen.declare("Point", GenericOption.GENERAL).type_name == "Point"
