from repo_compliance.cli import main

main()
