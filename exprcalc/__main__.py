from exprcalc.main import main

main()
