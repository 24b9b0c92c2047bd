import argparse
import logging
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from .config import PipelineConfig
from .data_prep import TableReader, load_table, require_numeric_columns
from .evaluate import EvaluationReport, evaluate
from .model_utils import LinearFitter, OrdinaryLeastSquares, SimpleLinearModel
from .plotting import MatplotlibScatterRenderer, ScatterRenderer, scatter_arrays
from .transform import filter_below, scale_column

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    table: pd.DataFrame
    model: SimpleLinearModel
    report: EvaluationReport


def run(config: PipelineConfig, reader: TableReader = load_table,
        fitter: Optional[LinearFitter] = None,
        renderer: Optional[ScatterRenderer] = None) -> PipelineResult:
    """
    Load, filter and rescale the housing table, fit income -> value and report.

    reader, fitter and renderer default to the pandas loader, the closed-form
    OLS learner and (when config.plot is set) a matplotlib scatterplot.
    """
    fitter = fitter or OrdinaryLeastSquares()
    feature_col, label_col = config.feature_column, config.label_column

    print("Folder: " + str(config.data_path))
    housing = reader(config.data_path, sep=config.separator)
    require_numeric_columns(housing, [feature_col, label_col])

    housing = filter_below(housing, label_col, config.max_label_value)
    scale_column(housing, label_col, config.label_divisor)

    feature = housing[feature_col].to_numpy(dtype=float)
    labels = housing[label_col].to_numpy(dtype=float)

    model = fitter.learn(feature, labels)
    print(f"Slope:      {model.slope}")
    print(f"Intercept:  {model.intercept}")

    report = evaluate(model, feature, labels)
    for line in report.lines():
        print(line)
    logger.info("RMSE %.4f (%.2f%% of label range)", report.rmse, report.rmse_percent)

    if renderer is None and (config.plot or config.plot_path):
        renderer = MatplotlibScatterRenderer(show=config.plot, save_path=config.plot_path)
    if renderer is not None:
        x, y, c = scatter_arrays(feature, report.predictions, labels)
        renderer.render(x, y, c, title="Training", xlabel=feature_col, ylabel=label_col)

    return PipelineResult(table=housing, model=model, report=report)


def build_parser():
    p = argparse.ArgumentParser(
        prog='housing-regression',
        description='Fit median income -> median house value by ordinary least squares.')
    p.add_argument('data_path', help='path to california_housing.csv')
    p.add_argument('--sep', default=',', help='field separator (default: ,)')
    p.add_argument('--feature', default='median_income')
    p.add_argument('--label', default='median_house_value')
    p.add_argument('--max-label', type=float, default=500000,
                   help='keep rows whose label is below this value')
    p.add_argument('--divisor', type=float, default=1000, help='divide the label column by this')
    p.add_argument('--no-plot', action='store_true', help='do not open the scatterplot window')
    p.add_argument('--save-plot', metavar='PATH', help='write the scatterplot to PATH')
    p.add_argument('--no-wait', action='store_true', help='exit without waiting for enter')
    p.add_argument('--log-level', default='INFO')
    p.add_argument('--log-file', default=None)
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(filename=args.log_file, level=args.log_level.upper(),
                        format='%(asctime)s %(name)s %(message)s')

    config = PipelineConfig(
        data_path=args.data_path,
        separator=args.sep,
        feature_column=args.feature,
        label_column=args.label,
        max_label_value=args.max_label,
        label_divisor=args.divisor,
        plot=not args.no_plot,
        plot_path=args.save_plot,
        wait_for_input=not args.no_wait,
    )
    run(config)
    if config.wait_for_input:
        input()


if __name__ == '__main__':
    main()
