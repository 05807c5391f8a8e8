"""Fee shard accounts of the fee program: derivation, lookup and balances."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Protocol

from tensor_eigen.pubkey import Pubkey, PubkeyError, find_program_address

TFEE_PROGRAM_ID = Pubkey.from_string("TFEEgwDP6nn1s8mMX2tTNPPz8j2VomkphLUmyxKm17A")
FEE_SHARD_SEED = b"fee_shard"
SHARD_COUNT = 256
DEFAULT_SHARDS_FILE = "fee_shards.json"

FEE_SHARDS: tuple[str, ...] = (
    "Fy3VHj5scaXLuFHB44Fp6oyM79vzTEZjFJdfpi6qUCLB",
    "5hCFdNkfpVmCryyzcGLxQSSUsbrFeKY99vF3e2kMvAqT",
    "HotUwnM16j33zC9JyaGWvno9f8wBKTtFbJdAwq7GqZDd",
    "8ei5eMTWSdZEV6J5zffrFvr5vFSxS1SeJ1ik9o1upue4",
    "FQCcVPRJiDNQLSVRHP1vvmauh8JUsgmN2ThWtLZhBEFy",
    "AsG5CRXJ1omSdR8X9s3okXbi5ekFc1ABkhzeruC73T9",
    "7BNWCyBYdKKxJtRznGz954p2EJk6a2kuyGmSHvYp5CiH",
    "HEeXWBM2CeqEg1Ez3KZrcgeH7mUCps1aFg62x3PAEtzJ",
    "GKoZNJVsnSNWsnN1iwmuPTrJePqqsYN8RH3NTzECzFgU",
    "2t51H5DH1b5APx4ZJSyfx5bCXfQjp82aMUifFkd1Ge1K",
    "2LYXvfnXVzrxfLCTnhjVgSV68QE2MCheD6j5KDqyNqgH",
    "42f9UFjep8LRDBBvgW1Qut4dGcYceXeH1QiMSZAYfpUB",
    "9qUKR2Q1jefHxDMRYaAwM5Xkqvoc7myRmxt59ihvwMur",
    "GUDDSpiW3z6Z7Gj2LUkoaxoewEFV77biDFytgKkH5hht",
    "5yp64a6LTAqHAU8GX9HtWVtx9cajoTLCodU9Rd1TUzMt",
    "EWBDF7oWCCUi1vaFLwkvaQ5A1TxwVMLLW9FG7MDybRee",
    "J7sebhmwoC1hEjjjYbJaySSXVZPmWwyJVSKUB1wdtyEM",
    "AJ2hERoBzxaAmAEymcxT8c1iQUtGs2mhe6PpV8zHVeVX",
    "Hyu3ouXGMWksgJtqgW6ZgWQJbkwPWaskWQLRbeLoUhv1",
    "GFE6axuyBHwFPkwfSe4kz9XrRjpKZgWoRaWTVj3o54a9",
    "8J4nUwcTW9TKKD7Z8yijtYBDJuGnRc7UcRTEzEWpnk1t",
    "CB85E6Yho7Up8cGqzHJ8UA3KziQy7MdJj1eWG1QWES5t",
    "FXeCPxwGhTwSFNLRAXbU6Qo92pito6PUdgXWhiqpQ47m",
    "3Tnf4i94bd9FyBJg5PSmnxZzCnuLhvfbSz7Bctc7rQgz",
    "EFVBkdoBn5wkWTW4Zf9A1VivuXUJ968Rh4SXDgceghyk",
    "Aiza2NcmbqbrBtyMmvzCkUwrMKC7y25xd4p96bq4mNau",
    "BHvu4MSr4TLLPVCatyPJ68wbj9QeiJjw1QN7cuxZsAFR",
    "CbsRibovM5fSqPZ5mY3273mvgvK7kwSyNUU5fxqVF3Sk",
    "2VU2y1xWfkoz1FrfDJeuw4tAqQQAdQDRK4LzBRi8wXDJ",
    "SbSkQpBz6uk7cprCJUY61VybVSYC8FmeSo9PTd11Srg",
    "DGNsxSXqRfjSSX9hRuArWbBzEdk1sFCwVw63wZULRdJg",
    "CMQKgcDT8zQFvSXzhnKmkGtQjrVnLEiNTuHN42zZeSzV",
    "EyhMkJb3XvcvdcXms21Jk5xCNftqr9v9Yfhn6E1kFU7L",
    "43fo6FVjMWepzyz1CGrtXbuZMW7vnHW2T7UeCntFJiCn",
    "68oM6G7VwxNWSoj9a95oTJBwakXymSo6QbZ4T3uBsek9",
    "DeLoVvGWEP4mdmVHCko3SVJe4mdHbKLMAy7uiTCs1jhZ",
    "E3iZfNnR4T4wdhta8znEzzVBy4VZzkPu3yLhyDp9MMjN",
    "V3KLBYytKbcR2bNfbmp9LCWuSq4gHfajFjFD4LrF8jz",
    "H1LXyssB8vm75mydkTYEjhx3swHsK7pEVMLm2Dp9k8x9",
    "3qdKbJQX9fb9aA7Gs8SA23ZKnke15uPwuj2v3CubmcGA",
    "9mTpor8Xj4NwdJheztwK7BAhf3T7BnwQCLzV6A2g7AF",
    "3F4qJtC8tTGf67CQYdfwGd5jVUUGZoHHxcLMugPBA3Eb",
    "F7SK3fkYLSHLsjKTub98wQ3pbqPAKAHDAsHkxhYY8Hn3",
    "DBMMYqZqJsiECpMyQvNdqvrrcfZsCuf3EcFumvjFGSLr",
    "DG3Aei8edirYWEuWrHkxpqKhZqspTM25VyxKK1Jqbteh",
    "GXV2zffE7csN8SMqrhcWHUnhx4p6PjyQ7dBJZKkRRCjb",
    "AgHy4JXDuoDC5QdB8wgPpdgpmVVdUFKSyGszCpX5d3wF",
    "8vJV7v7hxNrgQcrLfqCWV5FWB41X321dFoPgf1vEg87n",
    "DcmfbdgCsvz7QQ2xdRLPBWJPyrtEqbWULuis8zzAvPGz",
    "634MZm7UZSQoArSxp3728oLABohjK4Jb9Es5kaQ9yBUi",
    "GSa9qKEjFnUTKkpfGnuZPBSoS7RPUszV3T4p5AT4EAmv",
    "2pXiBi5pXSUNiSj6cJW5xwbXkd7AL4vCTpgjjbNUdWRZ",
    "tkXkQXTaTw6BKkg1M2F7ykae4AVwhDAe2xx4STu5joX",
    "AJP8jUBx1LY3unpftHkn4pUXMAEt8MUuiz8wDstHK9H6",
    "A5m562CXEGoHhqW4yVhnLExDSdVxh4rUL6omcZgsuudB",
    "Gntpr1cpCVJGCiwpiSdwD3ThAz6hsee22zTNTsuJChKM",
    "kLbSM2kThdYrq92ub3p3P3tAVqwu7smNtkkATxaqCqD",
    "DGYxWe2NATqfYtZ18KpdEdDxsymsXrFb5UEqhnawR94d",
    "HvokxshDW4U44s5XCT5B3LB7HES6ndjAowgyZuSkMPDS",
    "Hf1odTkgZAsArw3KLrZRd7C62SFsTBmzQ2V3kCGC6e3X",
    "BtQTCYmK4SJzawJ8PhU4Lc2BaQn1VQQzXrQKNZbvekFy",
    "BHxAZwYB2gJ37oXe4xtRx5EYevtxL3kGQN35uWFBQ3Pr",
    "EigfV7qhKfa3RsEMTN2EY977ZpxnKxjLCuwLEg96uzkt",
    "3cFAHHgMjvbQG7ntp8yKooSindBmT62RF5i8hwwQW2N9",
    "AUEEjTt7K15FGPyW7sHWkemD3YbMwpFWKxDWRBTzVhdX",
    "AbYiJMJvL21tZyJjJavfFCceptfLru9uLGxpxwU9Ej2q",
    "EDgqGa1XthzXkAEgb6nVfnkLUuPVp25xXoREgiSHc8yC",
    "FnJ726XQNVBtcmFNBbEPTfQKpr9JxY6M4GTtsFh98Qvd",
    "GTyoWmvD59xELDb3YkznhJf8aZLBMtzHC9LBEpS1BYUQ",
    "5KoLYeSEZvFpJfYeeezzjZbhieXCFbDnbpP4WRNGAD1B",
    "3i9cf7uQe2i1qCPpvSbu8RQfxnjf2B6VKL4Uh9z6mv5T",
    "239uA1QtXQHcGUhxgmxx7mhek27MmnK3zCUKryuVebY6",
    "HijQEbKM3zEDFRQoTaKY9GXSDn9xvio1RosN9MVUDsMW",
    "CHDXBc5WWLt53w4T9A42eyiYMYVias1iB267um4BdLG9",
    "FePsYjfVTPdW82eQWzuAdX8MHFoZYSXYszjKnwrvPu8n",
    "8quk1my8JjRwkbJwyxPHv7hHSmhrfwX7W7Dm2DeXgTnZ",
    "DLnCZYSjmRei1tZJuA746pov5pPuLeppKhS4ErqQ2pKo",
    "DsHgJFJEscFftuibbqEg1XRoaJEAYt9xu3KNt83sSQco",
    "AR9ArhMrXCQExuq8tS1GwxXwx7QbjH9MddkQsiRe2j7s",
    "2scFuQZBybHAP7AAHMfTXcD8fAdQRWcig1ASRTcZXVNp",
    "2p6PrELBVBP3zWb2sHuXX1Br1WBjYfKrWvLoMFtVwW5A",
    "f6FpqMJiVK7unNWAQALyDYTs7HGKFUcesXXN5apWS2A",
    "32nKW4Gg5zcEoxm3ACbryDfJvtrbyuy4KuSnPGZ4gBhS",
    "FxJKXNJqZZoU8bNHGBKwdxzCYTgqSGDGnLZRqVmia2Lg",
    "ECskwUFWFovksgguVk6WjdzPjiwgad3LRHuL669T4kCB",
    "3uWjneRNyeBvsvKbnGt4qSicGoGWnjxd9MrQgyRc8syL",
    "6Kq1EGziJbpmZhBaJQhvfQSZN6BXoXPbimiYXCt7hNDr",
    "F5EGxWWSGMZaWff93Uuu5qufdY2LoApVVY3ca65yGn6o",
    "DHZXTxf5FzJyefF66kAAVoBVnzydsAKErSpjBTJveMKj",
    "AmV2fdbGKErEWrqX3rgHnVfEWRR5YGFtMmoy5Af9RNvG",
    "J74aCaSoNBfv1SeR7HnzZvbLy2DnxrhMhEsaU4iTD7Dm",
    "48FaEYmhc4QdasKJxCU8yEP4nM3wBG7yGitTNTYKXsUE",
    "3GHG4u3C3qdXf6AUWJvBYAgqDkDehZWSpvwfooi7xggV",
    "43v7yMiwzKfnZW8K1B3QPHjubh83yAqaHTK1iacTwVWG",
    "AjjUjh1txBWDBYGVpZHdGPTMJ86zct5JWnZKweqkfLCZ",
    "Eq24kiFof6Ej7CQMDfYRQ2nMnmpBX1yhf3CUKfgsBQf3",
    "3gQvpKhcuv4JFcxTLHEcGXc79578PEPB2GUctaybbffW",
    "Bb4VravCUo6qyURhniM5LVRjq4reAvtCw6wA5pofFG8h",
    "2wwCshnBdcaA2MTEcvNcFyUALGzfu2bWijSzSFxL4HrE",
    "2N5tZCdQFUmsBngrMWms3BB2ktEU8mte1VihigbVQS9g",
    "9LQacmTEZyZjgWbYoqVLFybHY5bHWAkWhXTFtzxSR3ZL",
    "BLmAopyzd9pwrCxA9H7qZ5UJ4nCYiSYMwJBajvuAtkH7",
    "69jDEoDKSesAFYZNe3qtJbvRb7wJdqBmRCTdvDAYdndk",
    "4HCxg7CASJkVFCjvtxSDvcFXcSsra8W14sqmeJgbcpCR",
    "3raZU81kuKdcCkcbiyo8P33PrxWVMto3K3t1RRFFsn6t",
    "GyfnPxuHrvEUm6NzEm8LpVFGpvkGTwWEEZnn6JEAJXgP",
    "6s4Chj7znwQNMgMQoz88gAdfDMi8wTJVgTkLSEsNUyaC",
    "EZ4pd4DV3xWXm1cDMpBxWR8BBNzBHRWsrJrE7TL15tKV",
    "BtxkrkgXgYbzGTQmz8RAAzzDUWXg6xViKG1didzTFC3Z",
    "86nMRtR17DRJriN83hVybXGgojLJdLEd1YzPYFUhFJDq",
    "GtvrNsSf9owr4Qdze7bDtxiW9RfU71rDFFFyskBsMGzf",
    "B1J8EpjiiyPRBzaYm8bqEh2A4RiVf4FwkbNDs8EVyBqk",
    "EVScKrcRr2QgxVEYPHJHeewiaKRZqLTogHqq5PEMqz2L",
    "2bxYLsm7qw7ZosCo7KE5D39jvvkpmJa7awPRiwwwwb8h",
    "G3C7FQvcso53UUF2UjZfXZTHKkUU8Z7Z6Ecz4imgVLhP",
    "Gsd6aSGneCBJjvd4B2pfcdL3ZFDabbzB5TmQbDPnszqW",
    "CfEnCnuPioVWRxT5d3T9ZgRhs86zcjcvfSkFs871v7tH",
    "FrZtzjALzmHSX56XKzGaNKRuXgZELjcUy3L3YpAvo9bN",
    "HxQeSyDdAQyXxYH9uXm6vmoFWgtqW9orWhydqRtY4m7Y",
    "3DK3scw5uMExNgrWASuTFBiT24n2JcnxLumnxXh2atLt",
    "ALDY1N1eQBLrP1j2n11dBYAzVePAZmgmu5EvXieVzKr2",
    "8A5JVQsVuzP27k4prnSZSB6iYpCd9UdyqvE9TGErFpmc",
    "67DtKqjLpGQEvHujDDjfTPdx6qeJNeAmhc8VuBfUbFhH",
    "7MgXWxNaznLM8JoZKb3WQw4w6x9oWSjaYu1mXbBkYoSh",
    "3YLU1prF6tCWSZt5z1kg65cEVJexuY66QTt4k3f4j7ed",
    "8XJhHUxUZVXF97zLMHJb1F8bXSVLXEPXuXfCcs1Ukc2r",
    "4Z4LWxFBX94n1EDDAtD5pRrYDPcJFXS2mMhhk9ZoFuU1",
    "3Hff1pyZaXAAV8aAzZBEiN4dsogkPaSYSHBz2G6ECpwi",
    "6zgA4Jt7DVfzPFfDTujYbSN1K9UgfQFAr37KGarcWMD4",
    "AecHThZbNZoGdLxpXbRYYe13HzNBxHUrgcRrPDp2aRP2",
    "DVGjWwEdG7qHcBeN2vXYFQJBt8Sv8bipoGXjYQEWkycr",
    "6JVrqBJdE6uiD5XeVkdZsbQ9f8dp2AFEEkU9DVCurnVS",
    "BDpGdBny1HNT4Mue9uxipFnHTkp5pNELd29vsC1jvPcw",
    "J2pjCmPF3GrWyHNmKVSPV7dVuUbmxopE34RGQHDUYiFE",
    "CgBJHKVPKWV5KPXTPsfA2yKnKnDBQNobRRten3KUtpUC",
    "HRoMJpPk52ehquMmFmJXmMa5twhyftdxsBbtat4weZ45",
    "FU9Aj4QPSCNUGTECXEfgvGsrqKRpWLz9PFDBtQHPot1F",
    "D8BnapkJsTLCEnF5cUuG4BV5zjuSYQHQtTL2rJdX5UiR",
    "2Ctucqv7ppKpHrQWrRybZsvwtinJUmEvJgBMafJF2fA8",
    "DR88sPzju1sb8wneYkksQZytF5CLVvDPgMhxSCbTTFvQ",
    "9xmqGZHrpcnWBBnsF26vgnLsm4F5JK2YivmGYwAcJgYz",
    "7dD2gyTKrPwLbsc4FToEpqgE3sBRfWWJAyczCs3ViVF9",
    "4zeQQ9cQ8gvrL3R2fCZCJCKhCio7xayKAhLDC5oE37Fi",
    "6AXRZMKQGujEgArV1w6HmtJxLPNAvxbkgb3jsNyBt2rZ",
    "8DTxbEcTa7vpPPqB8jxaPqjZNqc8DmkHfH4WNPM1vbTf",
    "Av5yz4Np6HfiTbadQxp9dsEmTDSLi6tCKXjo2uhEw8uC",
    "8hkfyeinnBUfZBtm8CffnXHixuiYBBSYZ348bfQhsM69",
    "crJU5s8xgtothv6HbvMMPdWmVZMpWsbQojSp5k7QM5d",
    "23zaG2n2zXUt2ViYJWeaaBrMhbucZngN4Ciasd3ATz9D",
    "2MZoLMyawJHAcEkRw6CzsFj59kQMa2a45nnPwmkp8SKy",
    "CdPRb71n2EYpM1AQorLr2t5pLP4d3cP5qSHfZUnf4aMj",
    "DwwRn6kes6xkUP9zDBEBzNPvw7Yj4LWUftL712TS3gmo",
    "4UzuAe3afhLWEAayPAR9ghj6Uw9ZZdDES5RQ2wA6ZVZG",
    "FRfBhCvmgLem5irrfop9io55fLXiuACDFmkzJ6egRWJJ",
    "6FKfuFMcoR4NbJcy6xUFoXxxFNMamY1zHsUDD4uEjP4C",
    "BFKF5sA2qcUqBoGAVoy7eShtzAJc6twCbaA1hvycH9ja",
    "8Rbn9gy9Kmwci1Q4c6J5qZg6SZcvHX1j1JBmSEPfwTNk",
    "HSfN2QDUrm1JEgkN7JJaedCc2XBSpScxZicD48fZSaP9",
    "3cjLVSoQUE8o8zyw6uhtGjveVmDDsnxUSsKCjbcJP5L3",
    "BswVHfXP9iJUmWf1mSertNKbk4ErVZ3183ay9PSaZw26",
    "ETJtNkcLua5ZyVp2XrhbyKCVWQLjvyB2RKS65528t767",
    "3SjTuo8CsD2LrCQNHhNxFwUkKXbCpngYDGAHjZaJC14B",
    "HYQNp7gzT9DYH9ZqJYb9DbvEhkqu18b678E2k42Dvrxs",
    "7cmjDdbM6XwnaLv16id1nk1HFRD5UbewbY1fUAgFKrmQ",
    "3yqjWGhJ95vZc1biU68D9d1AyZH9RjSmah4diKbRTVrP",
    "6kTdjjhX65oa844CuVF68N7Y4tnjXSc6qLjcicv1FHQu",
    "4JJ3jsDeG4DxBCmKrbmCNXhfWuA3UeRB8qNfjBfmtW4t",
    "6Jbs7ZdmXxB4xavA4o5ckMFtG5uJdt3zw6Wa4Vj7ZYP1",
    "6XjMjqjH3v2kM9tBCbWFEVqs49JWZyviFAKQ3UJQEzz5",
    "BqJvGmMyK3g199SfBAkM8dXfDtTxVFQUSTiZvDAy4HED",
    "93QKoUpYqDEYXq5rdgsNg1DBzAjB73UDUuD1di9i7Vi6",
    "CAqrU2N5M6VHv8sL7TgMVK3qYEbgai5zQXKBtvxfUWG6",
    "q48Xrpowja5p5QvGMhWo13QKG5SdEasE7NAZ9aM7YQ6",
    "GAzizkRKFwKc2wwTozceBi6aYKvCUFMjdx1wsdJgTFc7",
    "9qG62mpvGPQvXek7T8RSvzamNLMr94z3Q8KRAVqz5Vue",
    "FnfTbRH6NMXmuJZSHgms6PLLjTxdzJNpER6Yyt2VqLDu",
    "85Vy1tqFqULDmfm3vCzQHrPLJs3zmCfJnLgZesGMm4hh",
    "4Hokb16DgmLYTYbRfXWaPmahMcYN1CLWUa6sNycHr7XT",
    "4KtMvx6CyqqJpW9bDKjQTzWMwhfM7fUsUHDri92R5BGM",
    "DsrU5a1a4wbmcso2UbDmU8ZwnHNqp2ZbQS9m2Mp5XatT",
    "54ztzmYHnTGqBmck3cceyq6enz7DY9pGp2FEX9UkCWAy",
    "8JZJDJRsAy949cNvPK8JuNxKxVczywo2QbZuxLTYYnzt",
    "E9KcnYNCRMZj9KUz2vj5KSa3xRZCyE2ZAWSPkXtcq22x",
    "CRaGFPmCAVMJzijE2BTT1ugDDnaY2jYzj4xSq9H93zfk",
    "3NucktM78PtguayiJfjiegyBAmKdNSZmJ8uz47kGKm8R",
    "7LHjbJwyoYyaHCx1rZdNKEUf2YF3mJZ3dKo7BcrRf5N6",
    "5MBtZeccZJawdBZZzfYVj5xM3Nnh8oUMsFcnQCz5BeGn",
    "CcFMXiEBRRmqfPQrxPGNoe1icusM5TKVRyFA5rWrRUHM",
    "9Dkv2bEMkD1jc3hfc6UD3ZmhrQ6rfNhvt97kEpnzLe3c",
    "3gSb6KfPsjDgUHMV7PRjT254EvqNmfcY75B4ktDqXfpX",
    "DUTsCsofRnZQP9ZK5kfxVKq3REhaNommYk8knfx7MFs9",
    "GjZRrRBTH7nsZFzUsXb5Mxv4tHnkNoMUbLheiwgtKQYU",
    "26phzgHzTGvazwCh9qxmvLob34ax3Jcxj8PPKiB2U2pa",
    "BbysbxkkoySv2UVbdtJ4H9yUdXntETc8Zhw8ZsvMdZ8x",
    "bh7WUcYFD8fhKPGjEe5rDZFdRLxQBk9ipG7ZyJsWV1N",
    "9qGDu51t3dVFBiSF2tDhSgikHeuvaLQBrVeR7Z1cXpji",
    "FhuKnqV6Zaxh463LEieHhYZLCYZbHhhkHJdU4PZfGd5C",
    "7HTbYVNwg8X1DBwPkt5kPtr4QS7ExzuT6bcrsXJAtxKz",
    "EceGF9iT1hwk41pCX2F7FRc2unxktEGyrwpdpvjUn6b8",
    "FLi4KPtbjXvY48FqkSKoo3bQSALjqu62mTEVPjjEZUn1",
    "CMFqhtrU6ACvXF585abv4BwTZyafbn2cJGyt9pLVdgBd",
    "3AQaRY8wCugbiieiorMxZimHfbvxYYVvG4FBycq1AJAi",
    "3ooguqkkP9msoMBv7jgfa5698xRgC99soJNiEkyk8eKg",
    "2qU9GNRp73FFU2ZFHbqpjfcy5TWZ3aYw4KcoJS1tV7rP",
    "B3BjtQrgdzZ7rs3ygKmAxrWtvUn8LFSKeDARE9M1JSx",
    "EnrbFyisHcE8ao3QpEqYDKViyCuFgWthL6WSucdqUfuC",
    "9eabbv3MnNsoLcTaeSxz1xh2ruoaoFHi25aZajHqLnv9",
    "8DkJTG2p4DqTLxPiRphAts92xo2T92nwLt94R9Nbng5S",
    "Cm2VPyXNZc7ZizobxmCLR3jtXfLtE2qMVFS1hDcYNDFz",
    "CC8N4GAS8YKDs977Znc5xtZow6GkyujStvFwTuKxr92x",
    "7uyURNneqnJWfGBnwe3fRabdr1TNfwkjzXGoRYw44HcN",
    "7cUtcQaHGfkAyKC91a3ktJc4YbukHFT3iFvw1BXub4rB",
    "4nKnXXNYYgXcB8DKd2G3tFDAbZM4UwAwufFXwFzDaX5a",
    "4ibeS3FZpixmfo7M8uNQqk6mD5eK38S26Uvw9Pp75wyP",
    "4YsvuZeLB8gNaGJCnqXVy62zao6iTRCPesUiXeW77HJv",
    "H3jYqZFY9wUCZugjHd4pPUQ93KvSjAd4TCMFz6c2NcdH",
    "Hs76ZZ3XXZ8ZMmYovxqkWpPpRaGXhgSEzLetXAdVZpSY",
    "J4dV7EKEiV2KE2DzNwrpKk44kLPzjzV9gkPHkV16H6x1",
    "4GvmrdKKp5jtjGbqAN5wM3B5vtzcCiU7xSrAmA2LAv3q",
    "8QKWBKovnH6j6M1HCGBphU5uA23HykuY4o3wYSM9A1Lf",
    "9eHKMBWg9NKN412qtvaFGZrZDej7aorQXk4QVwD47eAS",
    "HCRgAAuDu6o5vqbnkxMmr5JH17Fxkcb5trQ7eCozdG7F",
    "Bc6k1Z2uz1iuHgcdyR58CnKZoGMDTaKERFyARsARWRDy",
    "FFnt43tiuUTWZMAoNa5gSjJ8zCPFV7qNQxkNTmkvuaPt",
    "F6oqvPnGvKezaixAx1j24nhjDguwbKacMUQhr2a1iJjv",
    "FWqouN8mqwQRt4uSHaGkjSN6TtFtEgQZgZZGn9qAEkpT",
    "V2MCLnUJixXe95PvV8ART87YLGTZg8UJutoGivm28qh",
    "99wtSHrJVFtzUHcTzto2ENe2xom9EnBKjduoQSGpgVLR",
    "GXQjk3chYBok9oiErBUjcJG85RAnxdUBYZ3KMHBdr86n",
    "7HjJSnrxNqEUVbcE2hCEirukAKb92r4aVYyeEwJPCFie",
    "33CtJokfKGotUh6AqxYw2xqC1v52g1vYeuZkNxKLmhQo",
    "9Ux6QnPNYDMQLU3Pe5HdXTo1qQUrKE1Pdwy3sUNuwBgG",
    "8bom6cXRRvaRSsT5d2ieyN5RqWjwzoDmi2JFhpGJMmxd",
    "7wAxRnHWACXtg9wfzfCryxMq69MhZ4WHMB6aAjSzCHR3",
    "5qeFiAkUwvrMq8Lt8TpQYjMDGdEN1qqgqaRn7m9LTefe",
    "CivwHdJTa4QxvfMuaBDkcxJGVKFUNJmuxqccZm2jK8vd",
    "FDEbSnhSBLtFrwTDw1UhT7gZwnY7HVnQbpcDDjEhtPT",
    "JA8xLVfD3tSCQLZnXu42LS2UQuo8Ue9dKK6rC82ZCKM8",
    "78ypgw38byRiU1KzrYkKeUaRwEM1QGu7ny8M98hGGSbX",
    "6cLjqFrTNLcCihbyFgZX6owuaatGeYVS6LiYZ9Zt3ocY",
    "J6WuZY4ioMmgtjhgS4KByFLKB4YuSu59q8ipN9BYHTLK",
    "FUq4RngN5KGvnbLTVPeYyUpC56awtZ68suQN3QAAgXEB",
    "E91se7NqtyceAhntKDEUYWQULGjxycWYSShDgHC6szPq",
    "GFGvHyfh42ocvTu7AMLuuB21cJWPaWkNDTdDnfBRDohK",
    "23ZxPyYRDj55H774KiBew5KnZUE9csU12C5qy4XcJNjv",
    "E6MiqSmuNtJRNKumd5yW6v4tWi2DYQU6Tk7zNpxbkLNJ",
    "83MPRaFwVzM7PXJYzirF6xo9bb89M6wYJnoxsimSXpLo",
    "5PYCUbo6Nm5CchzVi9pkY3azgLAmpVKVw72xqqk7nSM2",
    "2AKQjDW8tYAu2zHC9gBBmDGBSCDCsXnWRxL7Z5TYrgRa",
    "Fo1WsrgZVekbBkepaqjcubbVqXtXt6KYJqYQBdqqXjrw",
    "Dx2zdMfdV2xhx7oHT5XGMbMWU1fDfT2xESdSVQ3kPvtC",
    "JAYeAzF59owxfEoHaKqwWW5mdCGNaiBfpPR6HttUtsyQ",
    "9FjkNcufJw8CzPQEv1ZSnnmB4B3TFksWUuStHf7Sfbas",
    "28MRnFb5y7EAffdMbZZhwNPqpmw5xoBHfqSb5vd29rdK",
    "5S9bzcMP7H6RCYGX7VztJcqFF3xt4mxnG77DcjTtwydJ",
    "6HMxGgGqA7qdGqnzwDFBWJK6WU56nGyB1YtqFKa66Rg2",
)

_FEE_SHARD_SET = frozenset(FEE_SHARDS)

FUNDED_MARK = "\u2713"
UNFUNDED_MARK = "\u2717"


class _BalanceClient(Protocol):
    def get_minimum_balance_for_rent_exemption(self, size: int) -> int: ...

    def get_balance(self, address: Pubkey) -> int: ...


@dataclass(frozen=True)
class ShardBalance:
    """The balance of one fee shard and whether it equals the rent-exempt minimum."""

    address: Pubkey
    balance: int
    funded: bool


def fee_shard_address(index: int) -> Pubkey:
    """Derive the fee shard address for a shard index in 0..255."""
    if not 0 <= index < SHARD_COUNT:
        raise ValueError(f"shard index must be between 0 and {SHARD_COUNT - 1}, got {index}")
    address, _bump = find_program_address([FEE_SHARD_SEED, bytes([index])], TFEE_PROGRAM_ID)
    return address


def generate_fee_shards(path: str | Path = DEFAULT_SHARDS_FILE) -> list[str]:
    """Derive all fee shard addresses and write them to a JSON file."""
    shards = [str(fee_shard_address(index)) for index in range(SHARD_COUNT)]
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(shards, handle, indent=2)
    return shards


def is_fee_shard(address: str | Pubkey) -> bool:
    """Tell whether an address is one of the known fee shards."""
    return str(address) in _FEE_SHARD_SET


def _shard_pubkeys() -> list[Pubkey]:
    pubkeys = []
    for text in FEE_SHARDS:
        try:
            pubkeys.append(Pubkey.from_string(text))
        except PubkeyError:
            continue
    return pubkeys


def get_shard_balances(client: _BalanceClient) -> list[ShardBalance]:
    """Fetch the balance of every fee shard."""
    pubkeys = _shard_pubkeys()
    rent_exempt = client.get_minimum_balance_for_rent_exemption(0)
    balances = []
    for pubkey in pubkeys:
        balance = client.get_balance(pubkey)
        balances.append(ShardBalance(pubkey, balance, balance == rent_exempt))
    return balances


def format_shard_balances(balances: Iterable[ShardBalance]) -> str:
    """Render one line per shard followed by a funding summary."""
    balances = list(balances)
    lines = [
        f"{entry.address} {entry.balance} {FUNDED_MARK if entry.funded else UNFUNDED_MARK}"
        for entry in balances
    ]
    funded = sum(1 for entry in balances if entry.funded)
    if funded == len(balances):
        lines.append("All shards fully funded!")
    else:
        lines.append(f"{funded}/{len(balances)} shards fully funded.")
    return "\n".join(lines)