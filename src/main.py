import argparse
import json
from pathlib import Path
import sys

from src.config import SearchConfig, METHODS
from src.util.parser import parse_input
from src.util.schedule_visualizer import visualize, solution_to_json
from src.util.sa_logger import SimulatedAnnealingLogger
from src.base_model.instance import Instance
from src.local_search.landing_problem import LandingProblem
from src.local_search.search_runner import run_local_search

def parse_arguments():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Aircraft Landing Scheduler')
    
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument('--input', type=str, help='Path to an OR-Library airland file')
    
    group.add_argument('--test', type=int, metavar='N_AIRCRAFT',
                       help='Generate test data with N_AIRCRAFT aircraft')
    
    parser.add_argument('--method', type=str, choices=METHODS, default='sa',
                        help='Search method to use (default: sa)')
    
    parser.add_argument('--iterations', type=int, default=100,
                        help='Simulated annealing iterations per aircraft (default: 100)')
    
    parser.add_argument('--alpha', type=float, default=0.99,
                        help='Cooling rate in (0, 1) (default: 0.99)')
    
    parser.add_argument('--sa-max', type=int, default=50,
                        help='Proposals per temperature (default: 50)')
    
    parser.add_argument('--hc-iterations', type=int, default=50,
                        help='Hill climbing iterations (default: 50)')
    
    parser.add_argument('--ils-patience', type=int, default=20,
                        help='Iterated local search attempts without improvement before stopping (default: 20)')
    
    parser.add_argument('--seed', type=int, default=13062025,
                        help='Seed for the random generator (default: 13062025)')
    
    parser.add_argument('--output', type=str, default='output.json',
                        help='Path to output JSON file (default: output.json)')
    
    parser.add_argument('--log', type=str, help='Path to log file for search output')
    
    parser.add_argument('--trace', type=str, help='Path to JSON file for the simulated annealing trace')
    
    parser.add_argument('--plot', type=str, help='Path to PNG file for the simulated annealing convergence plot')
    
    return parser.parse_args()

def main():
    """Main entry point for the scheduler."""
    args = parse_arguments()
    
    log_file = None
    try:
        if args.log:
            log_file = open(args.log, 'w')
        
        # Custom log function to write to both console and file
        def log_output(message):
            print(message)
            if log_file:
                log_file.write(message + "\n")
                log_file.flush()
        
        # Handle input data (use input file or generate test data)
        if args.input:
            input_path = Path(args.input)
            if not input_path.exists():
                print(f"Error: Input file {args.input} not found")
                return 1
            parsed_data = parse_input(input_path)
        else:
            from src.util.data_generator import generate_test_data
            parsed_data = generate_test_data(args.test, seed=args.seed)
        
        instance = Instance.from_parsed_data(parsed_data)
        problem = LandingProblem(instance)
        
        config = SearchConfig(
            method=args.method,
            seed=args.seed,
            iterations=args.iterations,
            alpha=args.alpha,
            sa_max=args.sa_max,
            hill_climb_iterations=args.hc_iterations,
            max_iterations_without_improvement=args.ils_patience
        )
        
        initial_solution = problem.initial_solution()
        initial_score = problem.cost(initial_solution)
        visualize(instance, initial_solution)
        
        sa_logger = SimulatedAnnealingLogger() if (args.trace or args.plot) else None
        
        final_solution = run_local_search(problem, config, log_output, sa_logger)
        visualize(instance, final_solution)
        
        log_output(f"Cost before: {initial_score}, Cost after: {problem.cost(final_solution)}")
        
        if sa_logger and args.trace:
            sa_logger.save_log(args.trace)
        if sa_logger and args.plot:
            sa_logger.create_visualization(args.plot)
        
        # Write solution to output file
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            json.dump(solution_to_json(instance, final_solution), f, indent=2)
        print(f"Solution written to {args.output}")

        return 0
        
    except Exception as e:
        print(f"Error: {str(e)}")
        import traceback
        traceback.print_exc()
        return 1
    finally:
        if log_file:
            log_file.close()

if __name__ == "__main__":
    sys.exit(main())
