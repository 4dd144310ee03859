import argparse
import logging
import sys

from invigil.io_utils import load_exams, load_teachers, save_assignments_csv
from invigil.algorithms.ordering import ORDERS
from invigil.scheduling.assign_teachers import build_schedule
from invigil.scheduling.evaluation import summary
from invigil.synthetic import generate_instance


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="Invigil – Exam Invigilation Planner")
    # Input modes
    p.add_argument('--exams', type=str, help='exams.csv with name,time_slot')
    p.add_argument('--teachers', type=str, help='teachers.csv with name,unavailable_slots')
    p.add_argument('--generate', type=int, default=None, help='Generate a synthetic instance with N exams')
    p.add_argument('--slots', type=int, default=4, help='Time slots for --generate')
    p.add_argument('--num_teachers', type=int, default=5, help='Teachers for --generate')
    p.add_argument('--unavailability', type=float, default=0.2,
                   help='Chance a generated teacher misses a slot')
    p.add_argument('--seed', type=int, default=42)

    # Search
    p.add_argument('--order', type=str, default='given', choices=ORDERS,
                   help='Exam visiting order for the search')

    # Output
    p.add_argument('--out_assignments', type=str, default='assignments.csv')
    p.add_argument('--log_level', type=str, default='WARNING')
    args = p.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.exams and args.teachers:
        exams = load_exams(args.exams)
        teachers = load_teachers(args.teachers)
    elif args.generate is not None:
        exams, teachers = generate_instance(
            args.generate, n_slots=args.slots, n_teachers=args.num_teachers,
            unavailability=args.unavailability, seed=args.seed,
        )
    else:
        raise SystemExit("Provide --exams and --teachers, or --generate N")

    result = build_schedule(exams, teachers, order=args.order, seed=args.seed)
    print(result.report)

    print(summary(result.graph, exams, teachers, result.assignments, result.success))

    if not result.success:
        return 1
    save_assignments_csv(args.out_assignments, result.assignments)
    print(f"Saved: {args.out_assignments}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
