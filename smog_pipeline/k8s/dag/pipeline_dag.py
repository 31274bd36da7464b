import os

from airflow import DAG
from airflow.providers.standard.operators.python import PythonOperator
from datetime import datetime, timedelta

from smog_pipeline.scripts.load_corpus import load_corpus
from smog_pipeline.scripts.clean_corpus import clean_corpus
from smog_pipeline.scripts.tokenize_corpus import ensure_nltk_data, tokenize_corpus
from smog_pipeline.scripts.compute_smog import compute_smog
from smog_pipeline.scripts.save_results import save_results

default_args = {
    'owner': 'nlp_team',
    'retries': 1,
    'retry_delay': timedelta(minutes=5),
}

# Paths backed by PVCs mounted at SMOG_DATA_DIR
DATA_DIR = os.environ.get("SMOG_DATA_DIR", "/data")
INPUT_DIR    = os.path.join(DATA_DIR, "input")
INTERMEDIATE = os.path.join(DATA_DIR, "intermediate")
OUTPUT_DIR   = os.path.join(DATA_DIR, "output")

GUTENBERG_IDS = tuple(
    int(book_id) for book_id in os.environ.get("SMOG_GUTENBERG_IDS", "").split(",") if book_id.strip()
)

with DAG(
    dag_id='smog_readability_pipeline',
    default_args=default_args,
    description='SMOG readability grades for a text corpus',
    schedule='@daily',
    start_date=datetime(2026, 1, 1),
    catchup=False,
    tags=['nlp', 'readability'],
) as dag:

    t_setup = PythonOperator(
        task_id='setup_nltk',
        python_callable=ensure_nltk_data,
        queue='default',
    )

    t_load = PythonOperator(
        task_id='load_corpus',
        python_callable=load_corpus,
        op_kwargs={
            'input_dir': INPUT_DIR,
            'output_path': os.path.join(INTERMEDIATE, 'corpus_raw.json'),
            'gutenberg_ids': GUTENBERG_IDS,
        },
        queue='default',
    )

    t_clean = PythonOperator(
        task_id='clean_corpus',
        python_callable=clean_corpus,
        op_kwargs={
            'input_path': os.path.join(INTERMEDIATE, 'corpus_raw.json'),
            'output_path': os.path.join(INTERMEDIATE, 'corpus_clean.json'),
        },
        queue='default',
    )

    # ----- HEAVY NLP TASKS (nlp queue) -----
    t_tokenize = PythonOperator(
        task_id='tokenize_corpus',
        python_callable=tokenize_corpus,
        op_kwargs={
            'input_path': os.path.join(INTERMEDIATE, 'corpus_clean.json'),
            'output_path': os.path.join(INTERMEDIATE, 'corpus_tokens.json'),
        },
        execution_timeout=timedelta(minutes=10),
        queue='nlp',
    )

    t_readability = PythonOperator(
        task_id='compute_smog',
        python_callable=compute_smog,
        op_kwargs={
            'input_path': os.path.join(INTERMEDIATE, 'corpus_tokens.json'),
            'output_path': os.path.join(INTERMEDIATE, 'readability.json'),
        },
        queue='nlp',
    )

    t_save = PythonOperator(
        task_id='save_results',
        python_callable=save_results,
        op_kwargs={
            'input_path': os.path.join(INTERMEDIATE, 'readability.json'),
            'output_path': os.path.join(OUTPUT_DIR, 'smog_results.json'),
            'csv_path': os.path.join(OUTPUT_DIR, 'smog_results.csv'),
        },
        queue='default',
    )

    # ----- TASK DEPENDENCIES -----
    t_setup >> t_load >> t_clean >> t_tokenize >> t_readability >> t_save
