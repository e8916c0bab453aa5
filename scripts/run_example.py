#!/usr/bin/env python3
"""
Utility script to run CGP on a data file.

Usage:
    python scripts/run_example.py examples/configs/config_regression.ini data.data
    python scripts/run_example.py examples/configs/config_parity.ini parity.data --mode experiment --num-trials 20
"""

import argparse

from loguru import logger

from evocgp       import Config, Dataset, Experiment, Trial
from evocgp.utils import setup_logger


def main():
    parser = argparse.ArgumentParser(description='Run CGP on a dataset')
    parser.add_argument('config',
                        help='INI configuration file')
    parser.add_argument('dataset',
                        help='Data file (header line: num_inputs,num_outputs,num_samples)')
    parser.add_argument('--mode', choices=['trial', 'experiment'], default='trial',
                        help='Run single trial or full experiment')
    parser.add_argument('--num-trials', type=int, default=10,
                        help='Number of trials for experiment mode')
    parser.add_argument('--num-jobs', type=int, default=1,
                        help='Number of parallel jobs')
    parser.add_argument('--save', default=None,
                        help='Write the fittest chromosome of a trial to this JSON file')
    parser.add_argument('--log-level', default='INFO',
                        help='Logging level')
    parser.add_argument('--log-file', default=None,
                        help='Also write the log to this file')

    args = parser.parse_args()
    setup_logger(level=args.log_level, log_file=args.log_file)

    config  = Config(args.config)
    dataset = Dataset.from_file(args.dataset)
    logger.info("\n{}", config)
    logger.info("\n{}", dataset)

    if args.mode == 'trial':
        trial      = Trial(config, dataset)
        population = trial.run(num_jobs=args.num_jobs)
        fittest    = population.get_fittest_chromosome()
        logger.info("\n{}", fittest)
        if args.save:
            fittest.save(args.save)
            logger.info("Saved chromosome to {}", args.save)
    else:
        experiment = Experiment(config, dataset, num_trials=args.num_trials)
        experiment.run(num_jobs_trials=args.num_jobs, num_jobs_fitness=1)


if __name__ == '__main__':
    main()
