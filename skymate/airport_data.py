"""Compiled-in airport network.

Each row is (iata, name, lat, lng, size, connections). Connections are the
directed routes flown from that airport; the table is trusted but the engine
still tolerates codes that do not resolve.
"""

AIRPORT_TABLE = [
    # Hokkaido
    ("CTS", "Sapporo (New Chitose)", 42.7752, 141.6923, "BIG", ["HND", "NRT", "ITM", "KIX", "NGO", "FUK", "HIJ", "AOJ", "HNA", "SDJ", "MMB", "TKS"]),
    ("OKD", "Sapporo (Okadama)", 43.1161, 141.3803, "SMALL", ["HKD", "KUH", "MMB", "RIS", "OIR", "SHB", "MSJ", "AXT"]),
    ("HKD", "Hakodate", 41.7700, 140.8244, "SMALL", ["HND", "ITM", "OKD", "OIR"]),
    ("AKJ", "Asahikawa", 43.6708, 142.4536, "SMALL", ["HND"]),
    ("KUH", "Kushiro", 43.0408, 144.1919, "SMALL", ["HND", "OKD"]),
    ("OBO", "Obihiro", 42.7333, 143.2172, "SMALL", ["HND"]),
    ("MMB", "Memanbetsu", 43.8800, 144.1644, "SMALL", ["HND", "CTS", "OKD", "ITM"]),
    ("SHB", "Nakashibetsu", 43.5775, 144.9592, "SMALL", ["HND", "OKD"]),
    ("RIS", "Rishiri", 45.2425, 141.1917, "SMALL", ["OKD", "CTS"]),
    ("OIR", "Okushiri", 42.0733, 139.4319, "SMALL", ["HKD", "OKD"]),

    # Tohoku
    ("AOJ", "Aomori", 40.7350, 140.6900, "SMALL", ["HND", "ITM", "CTS"]),
    ("MSJ", "Misawa", 40.7033, 141.3683, "SMALL", ["HND", "ITM", "OKD"]),
    ("AXT", "Akita", 39.6156, 140.2186, "SMALL", ["HND", "ITM", "OKD"]),
    ("HNA", "Hanamaki", 39.4286, 141.1353, "SMALL", ["ITM", "CTS"]),
    ("SDJ", "Sendai", 38.1397, 140.9169, "SMALL", ["ITM", "CTS"]),
    ("GAJ", "Yamagata", 38.4119, 140.3711, "SMALL", ["HND", "ITM"]),

    # Kanto / Chubu
    ("HND", "Tokyo (Haneda)", 35.5494, 139.7798, "BIG", ["CTS", "AKJ", "MMB", "KUH", "OBO", "HKD", "SHB", "AOJ", "MSJ", "AXT", "GAJ", "KMQ", "NGO", "ITM", "KIX", "SHM", "OKJ", "HIJ", "UBJ", "IZO", "TKS", "TAK", "KCZ", "MYJ", "FUK", "KKJ", "OIT", "NGS", "KMJ", "KMI", "KOJ", "ASJ", "OKA", "MMY", "ISG", "UEO"]),
    ("NRT", "Tokyo (Narita)", 35.7720, 140.3929, "BIG", ["CTS", "ITM", "KIX", "NGO"]),
    ("NGO", "Nagoya (Chubu)", 34.8584, 136.8048, "BIG", ["HND", "NRT", "CTS", "OKA", "ISG", "MMY"]),
    ("KMQ", "Komatsu", 36.3939, 136.4075, "SMALL", ["HND", "OKA"]),
    ("KIJ", "Niigata", 37.9558, 139.1206, "SMALL", ["ITM"]),
    ("MMJ", "Matsumoto", 36.1667, 137.9231, "SMALL", ["ITM"]),

    # Kansai
    ("ITM", "Osaka (Itami)", 34.7855, 135.4382, "BIG", ["HND", "NRT", "CTS", "HKD", "AOJ", "MMB", "MSJ", "AXT", "HNA", "SDJ", "GAJ", "KIJ", "MMJ", "TJH", "MYJ", "IZO", "OKI", "FUK", "OIT", "NGS", "KMJ", "KMI", "KOJ", "TNE", "KUM", "ASJ", "TKN", "OKA"]),
    ("KIX", "Osaka (Kansai)", 34.4320, 135.2304, "BIG", ["HND", "CTS", "NRT", "OKA", "ISG", "MMY"]),
    ("SHM", "Nanki-Shirahama", 33.6622, 135.3625, "SMALL", ["HND"]),
    ("TJH", "Tajima", 35.5133, 134.7869, "SMALL", ["ITM"]),

    # Chugoku / Shikoku
    ("OKJ", "Okayama", 34.7578, 133.8553, "SMALL", ["HND", "OKA"]),
    ("HIJ", "Hiroshima", 34.4361, 132.9194, "SMALL", ["HND", "CTS"]),
    ("UBJ", "Yamaguchi Ube", 33.9300, 131.2792, "SMALL", ["HND"]),
    ("IZO", "Izumo", 35.4136, 132.8892, "SMALL", ["HND", "ITM", "FUK", "OKI"]),
    ("OKI", "Oki", 36.1808, 133.3242, "SMALL", ["ITM", "IZO"]),
    ("TKS", "Tokushima", 34.1328, 134.6067, "SMALL", ["HND", "FUK", "CTS"]),
    ("TAK", "Takamatsu", 34.2142, 134.0153, "SMALL", ["HND"]),
    ("KCZ", "Kochi", 33.5461, 133.6694, "SMALL", ["HND", "FUK"]),
    ("MYJ", "Matsuyama", 33.8272, 132.6997, "SMALL", ["HND", "ITM", "FUK"]),

    # Kyushu
    ("FUK", "Fukuoka", 33.5859, 130.4506, "BIG", ["HND", "NRT", "ITM", "CTS", "OKA", "KMI", "TKS", "KCZ", "MYJ", "IZO", "ASJ", "KUM"]),
    ("KKJ", "Kitakyushu", 33.8456, 131.0350, "SMALL", ["HND"]),
    ("OIT", "Oita", 33.4794, 131.7375, "SMALL", ["HND", "ITM"]),
    ("NGS", "Nagasaki", 32.9169, 129.9136, "SMALL", ["HND", "ITM"]),
    ("KMJ", "Kumamoto", 32.8372, 130.8550, "SMALL", ["HND", "ITM"]),
    ("KMI", "Miyazaki", 31.8772, 131.4489, "SMALL", ["HND", "ITM", "FUK"]),
    ("KOJ", "Kagoshima", 31.8033, 130.7192, "BIG", ["HND", "ITM", "FUK", "TNE", "KUM", "KJK", "ASJ", "TKN", "OKE", "RNJ"]),

    # Islands (Kagoshima/Okinawa)
    ("TNE", "Tanegashima", 30.5453, 130.9839, "SMALL", ["KOJ", "ITM"]),
    ("KUM", "Yakushima", 30.3811, 130.6586, "SMALL", ["KOJ", "FUK", "ITM"]),
    ("KJK", "Kikai", 28.3228, 129.9286, "SMALL", ["KOJ", "ASJ"]),
    ("ASJ", "Amami", 28.4306, 129.7125, "SMALL", ["HND", "ITM", "FUK", "KOJ", "KJK", "TKN", "RNJ", "OKA"]),
    ("TKN", "Tokunoshima", 27.8361, 128.8825, "SMALL", ["KOJ", "ASJ", "OKE", "ITM"]),
    ("OKE", "Okinoerabu", 27.4253, 128.7006, "SMALL", ["KOJ", "TKN", "RNJ", "OKA"]),
    ("RNJ", "Yoron", 27.0422, 128.4011, "SMALL", ["KOJ", "ASJ", "OKE", "OKA"]),

    # Okinawa Main & Remote
    ("OKA", "Naha", 26.1958, 127.6458, "BIG", ["HND", "NRT", "ITM", "KIX", "NGO", "FUK", "KMQ", "OKJ", "UEO", "MMY", "ISG", "OGN", "MMD", "KTD", "ASJ", "OKE", "RNJ"]),
    ("UEO", "Kumejima", 26.3636, 126.7131, "SMALL", ["OKA", "HND"]),
    ("MMY", "Miyako", 24.7833, 125.2953, "SMALL", ["OKA", "HND", "KIX", "NGO", "ISG", "TRA"]),
    ("TRA", "Tarama", 24.6547, 124.6725, "SMALL", ["MMY"]),
    ("ISG", "Ishigaki", 24.3964, 124.2450, "SMALL", ["OKA", "HND", "KIX", "NGO", "MMY", "OGN"]),
    ("OGN", "Yonaguni", 24.4667, 122.9772, "SMALL", ["OKA", "ISG"]),
    ("MMD", "Minami-Daito", 25.8458, 131.2656, "SMALL", ["OKA", "KTD"]),
    ("KTD", "Kita-Daito", 25.9431, 131.3306, "SMALL", ["OKA", "MMD"]),
]
