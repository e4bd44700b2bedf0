#!/usr/bin/env python3
from components.word_generator import generate_random_words, gen_words_with_concatenations


class WorkLoad:
    def __init__(self, seed=None):
        self.seed = seed

    def words(self, num_words, concat_freq=0, unique=True):
        if concat_freq > 0:
            return self.concat_words(num_words, concat_freq)
        else:
            return generate_random_words(num_words, self.seed, unique)

    def concat_words(self, num_words, concat_freq=0.3, max_parts=3):
        return gen_words_with_concatenations(num_words, concat_freq, self.seed, max_parts)
