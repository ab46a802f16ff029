import argparse
import sys
from pathlib import Path

from loguru import logger

from citydistance.domain.exceptions import NotFoundError, ValidationError
from citydistance.domain.models import WorkflowStyle
from citydistance.domain.services import DistanceCalculator, LocationDirectory
from citydistance.domain.value_objects import City, Meters
from citydistance.services.interfaces import IDistanceWorkflow
from citydistance.services.workflow import (
    ComposedWorkflow,
    ResultSerializer,
    StagedWorkflow,
)
from citydistance.utils.config import DEFAULT_CONFIG_DIR, ConfigManager, set_logger


def build_workflow(config: ConfigManager, style: WorkflowStyle) -> IDistanceWorkflow:
    directory = LocationDirectory.from_config(config.directory)
    calculator = DistanceCalculator(
        earth_radius=Meters(config.distance.earth_radius_m)
    )
    renderer = ResultSerializer(decimal_places=config.rendering.decimal_places)

    if style is WorkflowStyle.STAGED:
        return StagedWorkflow(
            directory=directory, calculator=calculator, renderer=renderer
        )
    return ComposedWorkflow(
        directory=directory, calculator=calculator, renderer=renderer
    )


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Great-circle distance in feet between two known cities."
    )
    parser.add_argument("start", help='Start city, e.g. "Houston, TX"')
    parser.add_argument("dest", help='Destination city, e.g. "San Mateo, CA"')
    parser.add_argument(
        "--style",
        type=WorkflowStyle,
        choices=list(WorkflowStyle),
        default=WorkflowStyle.COMPOSED,
        help="Pipeline style used to process the request",
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=DEFAULT_CONFIG_DIR,
        help="Directory holding the *.yaml configuration files",
    )
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    config = ConfigManager(args.config_dir)
    set_logger(config.paths.log_dir, level=args.log_level)

    try:
        workflow = build_workflow(config, args.style)
        result = workflow.run(City.create(args.start), City.create(args.dest))
    except NotFoundError:
        # logged by the directory
        return 1
    except ValidationError as e:
        logger.error(str(e))
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
