import logging
from typing import Callable, List, Optional

from subsynth.config.settings import ArgOption, GenericOption, Setting
from subsynth.constants import HEADER_RANGE
from subsynth.domain.schema import BinaryPredicate, DomainSchema, Predicate, UnaryPredicate
from subsynth.generator.names import NameRegistry
from subsynth.generator.program import (
    Declaration,
    PredicateApplication,
    Program,
    ProgramBuilder,
    Statement,
    VarRef,
)
from subsynth.generator.random_source import RandomSource

logger = logging.getLogger("subsynth.generator")


class SubstanceGenerator:
    """Random Substance program generator for one domain schema."""

    def __init__(self, schema: DomainSchema, setting: Setting, rng: RandomSource):
        """
        schema: the domain every generated program conforms to
        setting: length range and argument policy, fixed for the batch
        rng: random source; survives :meth:`reset` so a batch is reproducible
        """
        self.schema = schema
        self.setting = setting
        self.random = rng
        self.names = NameRegistry()
        self.builder = ProgramBuilder()

        # Predicate applications are only a candidate when there is a predicate.
        self.statement_kinds: List[Callable[[], Statement]] = []
        if schema.predicates:
            self.statement_kinds.append(self.generate_predicate)
        self.statement_kinds.append(self.generate_type)

    def reset(self) -> None:
        """Forget names and statements; the random source is kept."""
        self.names.reset()
        self.builder.reset()

    # -- Programs --------------------------------------------------------------

    def generate_program(self) -> Program:
        header_count = self.random.draw_int(*HEADER_RANGE)
        body_count = self.random.draw_int(self.setting.min_length, self.setting.max_length)
        logger.debug("program: %d type declarations, %d body statements", header_count, body_count)

        for _ in range(header_count):
            self.generate_type()
        for _ in range(body_count):
            self.generate_statement()
        return self.builder.build(header_count, body_count)

    def generate_statement(self) -> Statement:
        """Generate and append one body statement.

        Every statement generator appends its own result, because generating
        arguments may append declarations before it.
        """
        generate = self.random.choose(self.statement_kinds)
        return generate()

    # -- Declarations ----------------------------------------------------------

    def generate_type(self) -> Declaration:
        type_name = self.random.choose(self.schema.type_names())
        return self.declare(type_name, GenericOption.CONCRETE)

    def declare(self, type_name: str, option: GenericOption = GenericOption.CONCRETE) -> Declaration:
        """Append a declaration of a fresh object.

        CONCRETE declares exactly *type_name*; GENERAL may declare one of its
        direct subtypes instead.  The generator itself only uses CONCRETE.
        """
        if option is GenericOption.GENERAL:
            type_name = self.random.choose(self.schema.possible_types(type_name))
        name = self.names.fresh_name(type_name)
        stmt = Declaration(type_name, name)
        self.builder.append(stmt)
        logger.debug("declared %s %s", type_name, name)
        return stmt

    # -- Predicates ------------------------------------------------------------

    def generate_predicate(self) -> PredicateApplication:
        pred = self.random.choose(self.schema.predicate_list())
        args = self.predicate_args(pred)
        stmt = PredicateApplication(pred.name, tuple(args))
        self.builder.append(stmt)
        return stmt

    def predicate_args(self, pred: Predicate) -> List[VarRef]:
        if isinstance(pred, UnaryPredicate):
            return self.generate_args(pred.arg_types)
        if isinstance(pred, BinaryPredicate):
            # No argument metadata exists for higher-order predicates.
            return []
        raise TypeError(f"unsupported predicate kind: {type(pred).__name__}")

    # -- Arguments -------------------------------------------------------------

    def generate_args(self, arg_types, option: Optional[ArgOption] = None) -> List[VarRef]:
        return [self.generate_arg(t, option) for t in arg_types]

    def generate_arg(self, type_name: str, option: Optional[ArgOption] = None) -> VarRef:
        """Return a reference to an object of *type_name*.

        EXISTING reuses a declared object and falls back to GENERATED when
        there is none; GENERATED declares a new object and then picks among
        all objects of the type; MIXED picks one of the two first.
        """
        if option is None:
            option = self.setting.arg_option
        if option is ArgOption.MIXED:
            option = self.random.choose([ArgOption.EXISTING, ArgOption.GENERATED])

        if option is ArgOption.EXISTING:
            existing = self.names.declared_of(type_name)
            if existing:
                return VarRef(self.random.choose(existing))
            logger.debug("no object of type %s yet, declaring one", type_name)

        self.declare(type_name, GenericOption.CONCRETE)
        return VarRef(self.random.choose(self.names.declared_of(type_name)))
