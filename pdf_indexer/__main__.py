from pdf_indexer.cli import main

main()
