from github_pr_checker.main import main

main()
