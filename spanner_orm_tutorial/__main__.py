from spanner_orm_tutorial.app import main

if __name__ == "__main__":
    main()
