#!/usr/bin/env python3
import argparse, logging, os, sys
from dungeongen.mapgen.generator import Dungeon
from dungeongen.rng import PMRandom, StdRandom

def make_rng(kind, seed):
    if kind == 'pm':
        # Park–Miller needs a seed; fall back to 1 for an arbitrary but fixed map
        return PMRandom.from_seed(seed if seed is not None else 1)
    return StdRandom(seed)

def build(args, seed):
    d = Dungeon(args.width, args.height, rng=make_rng(args.rng, seed))
    report = d.generate(args.features)
    return d, report

def write_dump(d, path):
    with open(path, 'w', encoding='utf-8') as f:
        f.write(d.dump())
        f.write('\n')

def cmd_emit(args):
    d, report = build(args, args.seed)
    if args.out == '-':
        sys.stdout.write(d.dump() + '\n')
    else:
        write_dump(d, args.out)
        print(f"Wrote {args.out}")
    print(
        f"rooms={report.rooms} corridors={report.corridors} "
        f"features={report.total_features} complete={report.complete}",
        file=sys.stderr,
    )

def cmd_batch(args):
    os.makedirs(args.outdir, exist_ok=True)
    for i in range(args.count):
        seed = args.seed + i
        d, report = build(args, seed)
        path = os.path.join(args.outdir, f"{seed:05d}.txt")
        write_dump(d, path)
        if not report.complete:
            print(f"seed {seed}: missing entrance/exit", file=sys.stderr)
    print(f"Wrote {args.count} dumps to {args.outdir}")

def add_common(p):
    p.add_argument('--width', type=int, default=80)
    p.add_argument('--height', type=int, default=40)
    p.add_argument('--features', type=int, default=35)
    p.add_argument('--rng', choices=('std', 'pm'), default='std')

def main():
    p = argparse.ArgumentParser(description="Generate dungeon debug dumps")
    p.add_argument('-v', '--verbose', action='count', default=0)
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    add_common(p1)
    p1.add_argument('--seed', type=int, default=None)
    p1.add_argument('--out', type=str, default='-')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('batch')
    add_common(p2)
    p2.add_argument('--seed', type=int, default=1, help="First seed; later maps use seed+1, seed+2, ...")
    p2.add_argument('--count', type=int, required=True)
    p2.add_argument('--outdir', type=str, required=True)
    p2.set_defaults(func=cmd_batch)
    args = p.parse_args()
    level = logging.WARNING - 10 * min(args.verbose, 2)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    args.func(args)

if __name__ == '__main__':
    main()
