"""Liskov substitution: any bird can be asked to fly or swim."""
from solid_principles.application.dispatcher import VariantDispatcher
from solid_principles.domain.base.ports import LoggingPort
from solid_principles.domain.bird.birds import Duck, Penguin, Sparrow, Swan
from solid_principles.infrastructure.error.error_middleware import ErrorMiddleware


def run_birds(logger: LoggingPort) -> None:
    dispatcher = VariantDispatcher(logger)
    invoke_or_log = ErrorMiddleware(logger).wrap_handler(dispatcher.invoke)

    birds = [Duck(logger), Penguin(logger), Sparrow(logger), Swan(logger)]
    for index, bird in enumerate(birds):
        if index:
            logger.info("")
        logger.info(f"{bird.variant_name}:")
        invoke_or_log(bird, "fly")
        invoke_or_log(bird, "swim")
